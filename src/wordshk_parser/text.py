"""Character classification for Cantonese text and Jyutping readings."""

from __future__ import annotations

from wordshk_parser.models import TokenClass

# CJK Unified Ideographs and Extensions A-E
IDEOGRAPH_RANGES: tuple[tuple[int, int], ...] = (
    (0x4E00, 0x9FFF),    # CJK Unified Ideographs
    (0x3400, 0x4DBF),    # Extension A
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0x2B820, 0x2CEAF),  # Extension E
)

PUNCTUATION: frozenset[str] = frozenset(
    "，,。.？?！!；;：:、⋯"
)

_READING_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
)


def _is_ideograph_char(ch: str) -> bool:
    code = ord(ch)
    for start, end in IDEOGRAPH_RANGES:
        if start <= code <= end:
            return True
    return False


def classify_char(ch: str) -> TokenClass:
    """Classify a single character. Every code point has exactly one class."""
    if len(ch) != 1:
        raise ValueError(f"Expected a single character, got {ch!r}")
    if _is_ideograph_char(ch):
        return TokenClass.IDEOGRAPH
    if ch in _READING_CHARS:
        return TokenClass.READING
    if ch in PUNCTUATION:
        return TokenClass.PUNCTUATION
    return TokenClass.OTHER


def classify_token(token: str) -> TokenClass:
    """Classify a token produced by :func:`wordshk_parser.tokenizer.tokenize`.

    Tokens are either a single character or a run of ASCII letters and digits.
    For arbitrary strings, a token containing any ideograph is an ideograph
    token, otherwise one containing any letter or digit is a reading token.
    """
    if not token:
        return TokenClass.OTHER
    if len(token) == 1:
        return classify_char(token)
    if is_ideograph(token):
        return TokenClass.IDEOGRAPH
    if is_reading(token):
        return TokenClass.READING
    if token in PUNCTUATION:
        return TokenClass.PUNCTUATION
    return TokenClass.OTHER


def is_ideograph(text: str) -> bool:
    """True if *text* contains a CJK ideograph."""
    return any(_is_ideograph_char(ch) for ch in text)


def is_reading(text: str) -> bool:
    """True if *text* contains an ASCII letter or digit."""
    return any(ch in _READING_CHARS for ch in text)


def is_punctuation(text: str) -> bool:
    return text in PUNCTUATION


def is_sentence(text: str) -> bool:
    """True if *text* ends with a punctuation mark."""
    return bool(text) and text[-1] in PUNCTUATION
