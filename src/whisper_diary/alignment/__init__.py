"""Transcript-to-speaker alignment module."""

from whisper_diary.alignment.aligner import resolve_speaker, align_segments

__all__ = [
    "resolve_speaker",
    "align_segments",
]
