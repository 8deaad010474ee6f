"""Domain model dataclasses and enums for wordshk-parser."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Language(str, Enum):
    """Language codes that may prefix a line of an entry body."""

    CANTONESE = "yue"
    ENGLISH = "eng"
    CHINESE = "zho"
    JAPANESE = "jpn"
    KOREAN = "kor"
    VIETNAMESE = "vie"
    CLASSICAL_CHINESE = "lzh"
    PORTUGUESE = "por"
    GERMAN = "deu"
    FRENCH = "fra"
    MANCHU = "mnc"
    LATIN = "lat"
    TIBETAN = "tib"
    CLASSIFIER = "量詞"

    @classmethod
    def lookup(cls, code: str) -> Language | None:
        """Return the member for *code*, or None if it is not a known code."""
        return _LANGUAGE_BY_CODE.get(code)


_LANGUAGE_BY_CODE: dict[str, Language] = {lang.value: lang for lang in Language}


class TokenClass(str, Enum):
    """Character class of a single character or token."""

    IDEOGRAPH = "ideograph"
    READING = "reading"
    PUNCTUATION = "punctuation"
    OTHER = "other"


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CsvRecord:
    """One raw row of the words.hk CSV export."""

    id: str
    headword: str
    entry: str
    variants: str = ""
    warning: str = ""
    public: str = ""

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> CsvRecord:
        return cls(
            id=str(row.get("id", "")),
            headword=str(row.get("headword", "")),
            entry=str(row.get("entry", "")),
            variants=str(row.get("variants") or ""),
            warning=str(row.get("warning") or ""),
            public=str(row.get("public") or ""),
        )


@dataclass(frozen=True, slots=True)
class TextReadingPair:
    """An orthographic token and its Jyutping reading ("" when none applies)."""

    text: str
    reading: str


@dataclass(frozen=True, slots=True)
class Headword:
    """Citation form of an entry with its readings."""

    text: str
    readings: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Tag:
    """A name/value tag such as ``pos:名詞`` or ``label:書面語``."""

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class LanguageData(Mapping):
    """Multilingual text of an explanation or example.

    Maps each language to its text segments in order of appearance. A language
    that appears twice in one block has two segments; they are never merged.
    Keys may be given as :class:`Language` members or as plain codes.
    """

    entries: tuple[tuple[Language, tuple[str, ...]], ...] = ()

    @classmethod
    def from_pairs(cls, pairs: list[tuple[Language, str]]) -> LanguageData:
        """Group ``(language, segment)`` pairs, keeping first-seen key order."""
        grouped: dict[Language, list[str]] = {}
        for lang, segment in pairs:
            grouped.setdefault(lang, []).append(segment)
        return cls(tuple((lang, tuple(segs)) for lang, segs in grouped.items()))

    def __getitem__(self, key: Language | str) -> tuple[str, ...]:
        lang = key if isinstance(key, Language) else Language.lookup(key)
        for item_lang, segments in self.entries:
            if item_lang is lang:
                return segments
        raise KeyError(key)

    def __iter__(self) -> Iterator[Language]:
        return (lang for lang, _ in self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict[str, list[str]]:
        """Plain ``{code: [segment, ...]}`` view."""
        return {lang.value: list(segments) for lang, segments in self.entries}


@dataclass(frozen=True, slots=True)
class Sense:
    """One meaning of a headword: an explanation plus worked examples."""

    explanation: LanguageData
    egs: tuple[LanguageData, ...]


@dataclass(frozen=True, slots=True)
class DictionaryEntry:
    """A fully parsed dictionary entry."""

    id: int
    headwords: tuple[Headword, ...]
    tags: tuple[Tag, ...]
    senses: tuple[Sense, ...]

    @property
    def pos(self) -> str | None:
        """Value of the first ``pos`` tag."""
        return next((t.value for t in self.tags if t.name == "pos"), None)

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(t.value for t in self.tags if t.name == "label")
