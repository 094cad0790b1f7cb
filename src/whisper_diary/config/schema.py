"""Pydantic configuration schemas with validation."""

from typing import Literal
from pydantic import BaseModel, Field

from whisper_diary.core.base import UNKNOWN_SPEAKER
from whisper_diary.core.timecode import DEFAULT_FRAME_RATE


class ParsingConfig(BaseModel):
    """Tabular input parsing configuration."""
    tolerant_markers: bool = True  # relaxed quoting/column counts for editor exports
    segment_columns: tuple[str, str, str] = ("start", "end", "text")
    marker_columns: tuple[str, str, str, str] = ("Speaker Name", "Start Time", "End Time", "Text")


class AlignmentConfig(BaseModel):
    """Segment-to-speaker alignment configuration."""
    frame_rate: int = Field(default=DEFAULT_FRAME_RATE, ge=1, le=120)
    unknown_speaker: str = Field(default=UNKNOWN_SPEAKER, min_length=1)


class OutputConfig(BaseModel):
    """Rendered output configuration."""
    formats: list[Literal["csv", "markdown", "markdown_clean"]] = Field(
        default_factory=lambda: ["csv", "markdown", "markdown_clean"],
        min_length=1,
    )
    output_dir: str = "./output"


class WhisperDiaryConfig(BaseModel):
    """Root configuration for Whisper Diary."""
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)
    alignment: AlignmentConfig = Field(default_factory=AlignmentConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
