"""Formatter registry."""

from whisper_diary.core import Registry, BaseFormatter

# Formatter Registry - all output renderers register here
FormatterRegistry = Registry[BaseFormatter]("formatters")
