"""Split Cantonese text and Jyutping readings into alignment tokens."""

from __future__ import annotations

from wordshk_parser.models import TokenClass
from wordshk_parser.text import classify_char


def tokenize(text: str) -> list[str]:
    """Split *text* into tokens.

    Runs of ASCII letters and digits form one token, so ``"get1"`` or a
    Jyutping syllable stays whole. A letter directly after a digit starts a
    new run, which separates syllables written without a space
    (``"bit1ging1"`` gives ``"bit1"``, ``"ging1"``). Every other character is
    a token on its own. Whitespace-only tokens are dropped.

    Example:
        >>> tokenize("你get唔get到？")
        ['你', 'get', '唔', 'get', '到', '？']
    """
    tokens: list[str] = []
    current = ""

    for ch in text:
        if classify_char(ch) is TokenClass.READING:
            if current and ch.isalpha() and not current[-1].isalpha():
                tokens.append(current)
                current = ""
            current += ch
            continue

        if current:
            tokens.append(current)
            current = ""
        tokens.append(ch)

    if current:
        tokens.append(current)

    return [tok for tok in (t.strip() for t in tokens) if tok]
