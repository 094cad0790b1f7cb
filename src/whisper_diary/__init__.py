"""Whisper Diary - speaker-attributed transcripts from two CSV exports.

Usage:
    from whisper_diary import TranscriptMerger
    
    merger = TranscriptMerger.from_config(env="development")
    result = merger.merge(whisper_csv_text, premiere_csv_text)
    
    print(result.markdown_clean)
"""

from whisper_diary.pipeline import TranscriptMerger, merge_transcripts
from whisper_diary.config import WhisperDiaryConfig, load_config
from whisper_diary.core import MergeResult

__version__ = "0.1.0"

__all__ = [
    "TranscriptMerger",
    "MergeResult",
    "WhisperDiaryConfig",
    "merge_transcripts",
    "load_config",
]
