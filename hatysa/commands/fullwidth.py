"""Convert text to vaporwave (fullwidth) text."""
from __future__ import annotations

IDEOGRAPHIC_SPACE = "\u3000"
_FULLWIDTH_OFFSET = 0xFEE0

_TABLE = {0x20: IDEOGRAPHIC_SPACE}
_TABLE.update({code: chr(code + _FULLWIDTH_OFFSET) for code in range(0x21, 0x7F)})


def fullwidth(text: str) -> str:
    """Map printable ASCII to its fullwidth form; leave everything else alone."""

    return text.translate(_TABLE)


__all__ = ["fullwidth"]
