"""Output formatters module."""

from whisper_diary.formatting.base import FormatterRegistry
from whisper_diary.formatting.table import TABLE_COLUMNS, TableFormatter, render_table
from whisper_diary.formatting.markdown import (
    SpeakerBlock,
    MarkdownFormatter,
    CleanMarkdownFormatter,
    group_by_speaker,
    render_markdown,
)

__all__ = [
    "FormatterRegistry",
    "TABLE_COLUMNS",
    "TableFormatter",
    "render_table",
    "SpeakerBlock",
    "MarkdownFormatter",
    "CleanMarkdownFormatter",
    "group_by_speaker",
    "render_markdown",
]
