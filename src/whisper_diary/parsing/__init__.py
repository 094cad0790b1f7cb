"""Tabular input parsing."""

from whisper_diary.parsing.tabular import parse_table, coerce_number
from whisper_diary.parsing.sources import parse_segments, parse_markers

__all__ = [
    "parse_table",
    "coerce_number",
    "parse_segments",
    "parse_markers",
]
