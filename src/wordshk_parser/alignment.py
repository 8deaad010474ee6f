"""Align Cantonese text with its Jyutping reading.

The text and the reading are tokenized separately and walked with two
cursors. What happens at each step depends only on the classes of the two
tokens under the cursors (``None`` when a side is exhausted), looked up in
:data:`ALIGNMENT_RULES`.
"""

from __future__ import annotations

from enum import Enum

from wordshk_parser.exceptions import AlignmentError
from wordshk_parser.models import TextReadingPair, TokenClass
from wordshk_parser.text import classify_token
from wordshk_parser.tokenizer import tokenize


class AlignAction(str, Enum):
    """What the aligner does with the tokens under its cursors."""

    PAIR = "pair"            # consume both, emit (text, reading)
    TEXT_ONLY = "text_only"  # consume text, emit (text, "")
    SKIP_BOTH = "skip_both"  # consume both, emit (text, "")
    FAIL = "fail"


_I = TokenClass.IDEOGRAPH
_R = TokenClass.READING
_P = TokenClass.PUNCTUATION
_O = TokenClass.OTHER

# (text class, reading class) -> action; None means that side is exhausted.
# Pairs not listed here fail.
ALIGNMENT_RULES: dict[tuple[TokenClass | None, TokenClass | None], AlignAction] = {
    (_I, _R): AlignAction.PAIR,
    (_R, _R): AlignAction.PAIR,

    (_P, _R): AlignAction.TEXT_ONLY,
    (_O, _R): AlignAction.TEXT_ONLY,
    (_I, None): AlignAction.TEXT_ONLY,
    (_R, None): AlignAction.TEXT_ONLY,
    (_P, None): AlignAction.TEXT_ONLY,
    (_O, None): AlignAction.TEXT_ONLY,

    (_P, _P): AlignAction.SKIP_BOTH,
    (_P, _O): AlignAction.SKIP_BOTH,
    (_P, _I): AlignAction.SKIP_BOTH,
    (_O, _P): AlignAction.SKIP_BOTH,
    (_O, _O): AlignAction.SKIP_BOTH,
    (_O, _I): AlignAction.SKIP_BOTH,
}


def decide(
    text_class: TokenClass | None,
    reading_class: TokenClass | None,
) -> AlignAction:
    """Look up the action for a pair of token classes."""
    return ALIGNMENT_RULES.get((text_class, reading_class), AlignAction.FAIL)


def align_readings(text: str, reading: str) -> list[TextReadingPair]:
    """Pair every token of *text* with its token of *reading*.

    Punctuation in the text gets an empty reading; punctuation present on both
    sides is consumed together. The text may run past the end of the
    readings, but every reading must be used.

    Example:
        >>> [(p.text, p.reading) for p in align_readings("你好！", "nei5 hou2")]
        [('你', 'nei5'), ('好', 'hou2'), ('！', '')]

    Raises:
        AlignmentError: If a pair of tokens cannot be reconciled or readings
            are left over.
    """
    text_tokens = tokenize(text)
    reading_tokens = tokenize(reading)

    pairs: list[TextReadingPair] = []
    ti = 0
    ri = 0

    for step in range(max(len(text_tokens), len(reading_tokens))):
        text_token = text_tokens[ti] if ti < len(text_tokens) else None
        reading_token = reading_tokens[ri] if ri < len(reading_tokens) else None
        action = decide(
            classify_token(text_token) if text_token is not None else None,
            classify_token(reading_token) if reading_token is not None else None,
        )

        if action is AlignAction.PAIR:
            pairs.append(TextReadingPair(text_token, reading_token))
            ti += 1
            ri += 1
        elif action is AlignAction.TEXT_ONLY:
            pairs.append(TextReadingPair(text_token, ""))
            ti += 1
        elif action is AlignAction.SKIP_BOTH:
            pairs.append(TextReadingPair(text_token, ""))
            ti += 1
            ri += 1
        else:
            raise AlignmentError(
                f'Unexpected text "{text_token}" and reading "{reading_token}" '
                f"at index {step} in {text}: {reading}",
                text_token=text_token,
                reading_token=reading_token,
                index=step,
                text=text,
                reading=reading,
            )

    if ri < len(reading_tokens):
        raise AlignmentError(
            f'Unexpected reading "{reading_tokens[ri]}" at index {ri} '
            f"in {text}: {reading}",
            reading_token=reading_tokens[ri],
            index=ri,
            text=text,
            reading=reading,
        )

    return pairs
