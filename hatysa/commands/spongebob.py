"""Convert text to Spongebob-case text."""
from __future__ import annotations


def spongebob(text: str) -> str:
    """Alternate the case of each letter, starting with lowercase.

    Characters that are not letters are copied as-is and do not advance the
    alternation, so ``"a1b"`` becomes ``"a1B"``.
    """

    output = []
    upper = False
    for char in text:
        if not char.isalpha():
            output.append(char)
            continue
        output.append(char.upper() if upper else char.lower())
        upper = not upper
    return "".join(output)


__all__ = ["spongebob"]
