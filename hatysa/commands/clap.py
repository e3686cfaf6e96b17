"""Put 👏 clap 👏 emojis 👏 between 👏 words."""
from __future__ import annotations

CLAP = "\N{CLAPPING HANDS SIGN}"


def clap(text: str) -> str:
    """Join the whitespace-delimited words of ``text`` with clap emojis.

    Input without any words yields a single clap.
    """

    words = text.split()
    if not words:
        return CLAP
    return f" {CLAP} ".join(words)


__all__ = ["CLAP", "clap"]
