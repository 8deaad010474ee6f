"""Custom exception hierarchy for wordshk-parser."""

from __future__ import annotations


class WordsHkError(Exception):
    """Base exception for all wordshk-parser errors."""


class ParseError(WordsHkError):
    """Structurally invalid entry (bad id, headword, tags, language code)."""


class AlignmentError(ParseError):
    """Text and Jyutping reading cannot be aligned token by token."""

    def __init__(
        self,
        message: str,
        *,
        text_token: str | None = None,
        reading_token: str | None = None,
        index: int | None = None,
        text: str = "",
        reading: str = "",
    ):
        self.text_token = text_token
        self.reading_token = reading_token
        self.index = index
        self.text = text
        self.reading = reading
        super().__init__(message)


class ConfigError(WordsHkError):
    """Invalid configuration file or value."""


class DataSourceError(WordsHkError):
    """Malformed CSV export or missing export file."""
