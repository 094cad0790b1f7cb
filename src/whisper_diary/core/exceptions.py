"""Custom exceptions for Whisper Diary."""

from enum import Enum


class WhisperDiaryError(Exception):
    """Base exception for all Whisper Diary errors."""
    pass


class ConfigError(WhisperDiaryError):
    """Configuration loading or validation error."""
    pass


class RegistryError(WhisperDiaryError):
    """Component registry error."""
    pass


class ParseReason(str, Enum):
    """Why a delimited table could not be parsed."""
    QUOTING = "quoting"
    COLUMNS = "columns"
    HEADER = "header"
    VALUE = "value"


class ParseError(WhisperDiaryError):
    """Tabular input could not be tokenized or lacks its header.
    
    Callers classify the failure through ``reason`` rather than by
    inspecting the message text.
    """
    
    def __init__(self, message: str, reason: ParseReason, line: int | None = None):
        self.reason = reason
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class EmptyInputError(WhisperDiaryError):
    """One of the raw inputs is blank."""
    pass


class EmptyResultError(WhisperDiaryError):
    """Parsing succeeded but produced nothing to merge."""
    pass
