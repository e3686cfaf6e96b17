"""H̛̹͝e̳̼͙ ̤̎͝c͓̺̎ȏ͇ͤm̨͡͠e͚ͫ͡s͗ͭ͢"""
from __future__ import annotations

import random
from typing import Optional

DEFAULT_MARKS_PER_CHAR = 10
COMBINING_MARKS = range(0x300, 0x36F)

_RANDOM = random.Random()  # nosec B311 - pseudo-RNG acceptable for text effects


def marks_per_char(text: str, max_chars: Optional[int], limit: int = DEFAULT_MARKS_PER_CHAR) -> int:
    """How many combining marks fit after each character of ``text``."""

    if max_chars is None or not text:
        return limit
    return max(0, min(limit, (max_chars - len(text)) // len(text)))


def zalgo(
    text: str,
    max_chars: Optional[int] = None,
    *,
    rng: Optional[random.Random] = None,
    limit: int = DEFAULT_MARKS_PER_CHAR,
) -> str:
    """Follow every character of ``text`` with random combining diacritics.

    When ``max_chars`` is given, fewer marks are added so the output stays
    within that length wherever the input alone fits.
    """

    rng = rng or _RANDOM
    per_char = marks_per_char(text, max_chars, limit)
    output = []
    for char in text:
        output.append(char)
        output.extend(chr(rng.choice(COMBINING_MARKS)) for _ in range(per_char))
    return "".join(output)


__all__ = ["COMBINING_MARKS", "DEFAULT_MARKS_PER_CHAR", "marks_per_char", "zalgo"]
