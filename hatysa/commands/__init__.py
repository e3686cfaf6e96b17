"""Text commands available to the bot.

Each module holds one transformation; :mod:`hatysa.core` wires them into a
registry.
"""

from .clap import clap
from .fullwidth import fullwidth
from .info import info, split_uptime
from .react import react
from .sketchify import SketchifyClient, sketchify, validate_url
from .spongebob import spongebob
from .zalgo import zalgo

PONG = "Pong!"


def ping() -> str:
    return PONG


__all__ = [
    "PONG",
    "SketchifyClient",
    "clap",
    "fullwidth",
    "info",
    "ping",
    "react",
    "sketchify",
    "split_uptime",
    "spongebob",
    "validate_url",
    "zalgo",
]
