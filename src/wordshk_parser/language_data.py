"""Parser for the multilingual ``lang:text`` blocks of an entry body."""

from __future__ import annotations

from wordshk_parser.exceptions import ParseError
from wordshk_parser.models import Language, LanguageData


def parse_language_data(text: str) -> LanguageData:
    """Parse a block of ``lang:text`` lines.

    A line containing a colon opens a new segment for the language named
    before the colon. A line without a colon continues the open segment and is
    joined to it with a newline. Each segment is trimmed and empty segments
    are dropped. Lines before the first language line belong to no segment
    and are ignored.

    Example:
        >>> parse_language_data("eng:hello\\nyue:你好\\neng:world").to_dict()
        {'eng': ['hello', 'world'], 'yue': ['你好']}

    Raises:
        ParseError: If the prefix of a line containing a colon is not a
            known language code. Such a line is never read as a continuation.
    """
    pairs: list[tuple[Language, str]] = []
    current_lang: Language | None = None
    buffer = ""

    def flush() -> None:
        segment = buffer.strip()
        if current_lang is not None and segment:
            pairs.append((current_lang, segment))

    for line in text.split("\n"):
        if ":" not in line:
            buffer += "\n" + line.strip()
            continue

        prefix, _, content = line.partition(":")
        lang = Language.lookup(prefix)
        if lang is None:
            raise ParseError(f"Invalid language: {prefix}")

        flush()
        current_lang = lang
        buffer = content.strip()

    flush()
    return LanguageData.from_pairs(pairs)
