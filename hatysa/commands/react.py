"""Spell a word out as reaction emojis."""
from __future__ import annotations

from typing import Tuple

from ..errors import MissingArgumentError, NonAlphanumericError, WhitespaceError

REGIONAL_INDICATOR_A = 0x1F1E6
VARIATION_SELECTOR_16 = "\ufe0f"
COMBINING_ENCLOSING_KEYCAP = "\u20e3"


def _to_emoji(char: str) -> str:
    if "0" <= char <= "9":
        return char + VARIATION_SELECTOR_16 + COMBINING_ENCLOSING_KEYCAP
    return chr(REGIONAL_INDICATOR_A + ord(char.lower()) - ord("a"))


def react(text: str) -> Tuple[str, ...]:
    """Convert an ASCII-alphanumeric word to regional indicator and keycap emojis.

    Raises a :class:`~hatysa.errors.ValidationError` for empty input, input
    containing whitespace, or any character outside ``[A-Za-z0-9]``.

    Discord merges repeated reactions from the same user, so each emoji is
    returned once, in order of first appearance: ``"hello"`` spells h-e-l-o.
    """

    if not text:
        raise MissingArgumentError("react")
    if any(char.isspace() for char in text):
        raise WhitespaceError("react", text)
    if not (text.isascii() and text.isalnum()):
        raise NonAlphanumericError("react", text)
    return tuple(dict.fromkeys(_to_emoji(char) for char in text))


__all__ = ["react"]
