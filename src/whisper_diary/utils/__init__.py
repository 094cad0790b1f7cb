"""Utilities: logging and decorators."""

from whisper_diary.utils.logging import setup_logging, get_logger
from whisper_diary.utils.decorators import timed, logged

__all__ = [
    "setup_logging",
    "get_logger",
    "timed",
    "logged",
]
