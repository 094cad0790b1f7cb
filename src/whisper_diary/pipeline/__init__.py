"""Pipeline module - merge orchestration."""

from whisper_diary.pipeline.merger import TranscriptMerger, merge_transcripts, default_stem

__all__ = [
    "TranscriptMerger",
    "merge_transcripts",
    "default_stem",
]
