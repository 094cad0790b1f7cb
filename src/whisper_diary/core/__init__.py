"""Core components: data classes, timecodes, registry, exceptions."""

from whisper_diary.core.registry import Registry
from whisper_diary.core.timecode import (
    DEFAULT_FRAME_RATE,
    Timecode,
    timecode_to_ms,
    ms_to_timecode,
)
from whisper_diary.core.base import (
    UNKNOWN_SPEAKER,
    TranscriptSegment,
    TimeMarker,
    AlignedSegment,
    MergeResult,
    BaseFormatter,
)
from whisper_diary.core.exceptions import (
    WhisperDiaryError,
    ConfigError,
    RegistryError,
    ParseReason,
    ParseError,
    EmptyInputError,
    EmptyResultError,
)

__all__ = [
    # Registry
    "Registry",
    # Timecodes
    "DEFAULT_FRAME_RATE",
    "Timecode",
    "timecode_to_ms",
    "ms_to_timecode",
    # Data classes
    "UNKNOWN_SPEAKER",
    "TranscriptSegment",
    "TimeMarker",
    "AlignedSegment",
    "MergeResult",
    "BaseFormatter",
    # Exceptions
    "WhisperDiaryError",
    "ConfigError",
    "RegistryError",
    "ParseReason",
    "ParseError",
    "EmptyInputError",
    "EmptyResultError",
]
