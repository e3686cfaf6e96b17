"""Core data models for Hatysa."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Tuple, Union


class ArgumentKind(str, Enum):
    """How a command interprets the text that follows its name."""

    NONE = "none"
    TEXT = "text"
    WORD = "word"


@dataclass(frozen=True)
class TextResponse:
    """Plain text to send back to the channel."""

    text: str


@dataclass(frozen=True)
class ReactResponse:
    """Emoji to add, in order, as reactions to the previous message."""

    reactions: Tuple[str, ...]


@dataclass(frozen=True)
class InfoResponse:
    version: str
    uptime: Tuple[int, int, int, int]
    homepage: str

    @property
    def uptime_label(self) -> str:
        days, hours, minutes, seconds = self.uptime
        return f"{days}d {hours}h {minutes}m {seconds}s"


@dataclass(frozen=True)
class LinkResponse:
    """A URL to hand back to the user who asked for it."""

    url: str


@dataclass(frozen=True)
class HelpEntry:
    name: str
    usage: str
    summary: str
    aliases: Tuple[str, ...] = ()


@dataclass(frozen=True)
class HelpResponse:
    entries: Tuple[HelpEntry, ...]


Response = Union[TextResponse, ReactResponse, InfoResponse, LinkResponse, HelpResponse]


@dataclass(frozen=True)
class CommandSpec:
    """Describes a single command: its names, argument contract and handler.

    ``handler`` receives the argument text (already stripped) and returns a
    response; it raises a :class:`~hatysa.errors.CommandError` when the
    argument is unusable. ``blocking`` marks handlers that perform network
    I/O so callers on an event loop can run them in a worker thread.
    """

    name: str
    handler: Callable[[str], Response]
    argument: ArgumentKind = ArgumentKind.TEXT
    summary: str = ""
    aliases: Tuple[str, ...] = field(default_factory=tuple)
    blocking: bool = False

    @property
    def usage(self) -> str:
        if self.argument is ArgumentKind.NONE:
            return self.name
        if self.argument is ArgumentKind.WORD:
            return f"{self.name} <word>"
        return f"{self.name} <text>"


@dataclass
class GuildRecord:
    """A Discord guild the bot is a member of.

    Guild ids are 64-bit unsigned snowflakes, stored as text because SQLite
    integers are signed.
    """

    id: str
    name: str


__all__ = [
    "ArgumentKind",
    "CommandSpec",
    "GuildRecord",
    "HelpEntry",
    "HelpResponse",
    "InfoResponse",
    "LinkResponse",
    "ReactResponse",
    "Response",
    "TextResponse",
]
