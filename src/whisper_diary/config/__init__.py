"""Configuration management."""

from whisper_diary.config.schema import (
    WhisperDiaryConfig,
    ParsingConfig,
    AlignmentConfig,
    OutputConfig,
)
from whisper_diary.config.loader import load_config, load_yaml, deep_merge

__all__ = [
    # Main config
    "WhisperDiaryConfig",
    "load_config",
    # Sub-configs
    "ParsingConfig",
    "AlignmentConfig",
    "OutputConfig",
    # Utilities
    "load_yaml",
    "deep_merge",
]
