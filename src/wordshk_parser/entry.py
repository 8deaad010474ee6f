"""Assemble a :class:`DictionaryEntry` from one row of the export."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from wordshk_parser.exceptions import ParseError
from wordshk_parser.models import CsvRecord, DictionaryEntry, Headword, Tag
from wordshk_parser.senses import parse_senses

POS_MARKER = "(pos:"


def parse_entry(record: CsvRecord | Mapping[str, Any]) -> DictionaryEntry:
    """Parse one CSV record into a dictionary entry.

    Args:
        record: A :class:`CsvRecord` or a mapping with the same keys

    Returns:
        The parsed entry

    Raises:
        ParseError: On the first structural problem in the record
    """
    if not isinstance(record, CsvRecord):
        record = CsvRecord.from_mapping(record)

    entry_id = parse_id(record.id)
    headwords = parse_headwords(record.headword)

    lines = record.entry.replace("\r\n", "\n").split("\n")
    tag_line, remaining = split_tag_line(lines)
    tags = parse_tags(tag_line)
    senses = parse_senses("\n".join(remaining))

    return DictionaryEntry(
        id=entry_id,
        headwords=headwords,
        tags=tags,
        senses=senses,
    )


def parse_id(raw: str) -> int:
    """Parse a row id, which must be a positive integer."""
    try:
        entry_id = int(raw.strip())
    except ValueError:
        raise ParseError(f"Invalid id: {raw}") from None
    if entry_id <= 0:
        raise ParseError(f"Invalid id: {raw}")
    return entry_id


def parse_headwords(headword_string: str) -> tuple[Headword, ...]:
    """Parse ``text:reading[:reading...]`` groups separated by commas.

    Example:
        >>> parse_headwords("飲茶:jam2 caa4")
        (Headword(text='飲茶', readings=('jam2 caa4',)),)
    """
    headwords = []
    for group in headword_string.split(","):
        text, *readings = (part.strip() for part in group.split(":"))
        if not text or not any(readings):
            raise ParseError(f"Invalid headword: {group}")
        headwords.append(Headword(text=text, readings=tuple(readings)))
    return tuple(headwords)


def split_tag_line(lines: Sequence[str]) -> tuple[str, list[str]]:
    """Separate the tag line from the rest of an entry body.

    Returns:
        ``(tag_line, remaining_lines)``; *lines* is left untouched

    Raises:
        ParseError: If the body is empty or does not start with ``(pos:``
    """
    if not lines or not lines[0].strip():
        raise ParseError(f"Entry is empty: {list(lines)}")
    if not lines[0].startswith(POS_MARKER):
        raise ParseError(f"Entry does not start with {POS_MARKER}): {lines[0]}")
    return lines[0], list(lines[1:])


def parse_tags(tag_line: str) -> tuple[Tag, ...]:
    """Parse a line of ``(name:value)`` groups, e.g. ``(pos:名詞)(label:書面語)``."""
    if not tag_line.startswith(POS_MARKER):
        raise ParseError(f"Entry does not start with {POS_MARKER}): {tag_line}")

    tags = []
    for fragment in tag_line.split(")("):
        fragment = fragment.replace("(", "").replace(")", "").strip()
        if not fragment:
            continue
        name, sep, value = fragment.partition(":")
        if not sep:
            raise ParseError(f"Malformed tag {fragment!r} in {tag_line}")
        tags.append(Tag(name=name.strip(), value=value.strip()))

    if not tags:
        raise ParseError(f"No tags found: {tag_line}")
    return tuple(tags)
