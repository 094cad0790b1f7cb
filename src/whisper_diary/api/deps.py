"""FastAPI dependencies."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from whisper_diary.api.config import APIConfig, DEFAULT_API_CONFIG
from whisper_diary.pipeline import TranscriptMerger


def get_api_config(request: Request) -> APIConfig:
    """API configuration the app was created with."""
    return getattr(request.app.state, "config", None) or DEFAULT_API_CONFIG


def get_merger(request: Request) -> TranscriptMerger:
    """Merger shared by all requests; it holds no per-request state."""
    merger = getattr(request.app.state, "merger", None)
    if merger is None:
        merger = TranscriptMerger()
        request.app.state.merger = merger
    return merger


Config = Annotated[APIConfig, Depends(get_api_config)]
Merger = Annotated[TranscriptMerger, Depends(get_merger)]
