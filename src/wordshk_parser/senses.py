"""Split an entry body into senses, explanations and examples."""

from __future__ import annotations

import re

from wordshk_parser.language_data import parse_language_data
from wordshk_parser.models import Sense

SENSE_DELIMITER = "----"
EXAMPLE_DELIMITER = "<eg>"
EXPLANATION_MARKER = "<explanation>"

_SENSE_SPLIT_RE = re.compile(rf"^{re.escape(SENSE_DELIMITER)}$", re.MULTILINE)
_EXAMPLE_SPLIT_RE = re.compile(rf"^{re.escape(EXAMPLE_DELIMITER)}$", re.MULTILINE)
_EXPLANATION_RE = re.compile(rf"\A\s*{re.escape(EXPLANATION_MARKER)}[ \t]*(?:\n|\Z)")


def parse_sense(block: str) -> Sense:
    """Parse one sense block: an explanation followed by ``<eg>`` examples."""
    block = _EXPLANATION_RE.sub("", block, count=1)
    explanation_text, *example_texts = _EXAMPLE_SPLIT_RE.split(block)
    return Sense(
        explanation=parse_language_data(explanation_text),
        egs=tuple(parse_language_data(eg) for eg in example_texts),
    )


def parse_senses(body: str) -> tuple[Sense, ...]:
    """Parse the part of an entry body that follows the tag line.

    Senses are separated by a line consisting of ``----``; a blank body has no
    senses.
    """
    if not body.strip():
        return ()
    return tuple(parse_sense(block) for block in _SENSE_SPLIT_RE.split(body))
