"""Command backend: resolves command names and executes them.

Nothing in this module knows about Discord, so commands can be run from
tests or other programs without a connection::

    >>> from hatysa import Backend
    >>> Backend().execute("clap", "so much fun")
    TextResponse(text='so 👏 much 👏 fun')
"""
from __future__ import annotations

import dataclasses
import logging
import random
from datetime import datetime, timezone
from typing import Callable, Dict, Iterator, List, Optional

from . import __version__
from .commands import (
    SketchifyClient,
    clap,
    fullwidth,
    info,
    ping,
    react,
    sketchify,
    spongebob,
    zalgo,
)
from .commands.sketchify import Fetcher
from .config import Settings, get_settings
from .errors import UnknownCommandError, WhitespaceError
from .models import (
    ArgumentKind,
    CommandSpec,
    HelpEntry,
    HelpResponse,
    InfoResponse,
    LinkResponse,
    ReactResponse,
    Response,
    TextResponse,
)
from .tracking import track_command

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Explicit mapping from command names and aliases to command specs."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandSpec] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, spec: CommandSpec) -> CommandSpec:
        names = [spec.name, *spec.aliases]
        for name in names:
            if name.lower() in self._commands or name.lower() in self._aliases:
                raise ValueError(f"Command name {name!r} is already registered")
        tracked = dataclasses.replace(spec, handler=track_command(spec.name)(spec.handler))
        self._commands[spec.name.lower()] = tracked
        for alias in spec.aliases:
            self._aliases[alias.lower()] = spec.name.lower()
        return tracked

    def get(self, name: str) -> Optional[CommandSpec]:
        key = name.lower()
        key = self._aliases.get(key, key)
        return self._commands.get(key)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(sorted(self._commands.values(), key=lambda spec: spec.name))

    def __len__(self) -> int:
        return len(self._commands)


class Backend:
    """Executes commands against explicit configuration.

    ``start_time`` feeds the ``info`` uptime, ``rng`` drives ``zalgo`` and
    ``fetch`` performs the ``sketchify`` request; all three can be replaced
    for deterministic use. ``max_output_length`` caps generated text where a
    command can adapt its output to a limit.
    """

    def __init__(
        self,
        *,
        settings: Settings | None = None,
        start_time: Optional[datetime] = None,
        rng: Optional[random.Random] = None,
        fetch: Optional[Fetcher] = None,
        clock: Optional[Callable[[], datetime]] = None,
        max_output_length: Optional[int] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.start_time = start_time or self._clock()
        self._rng = rng
        self._fetch: Fetcher = fetch or SketchifyClient(
            self.settings.sketchify_endpoint, self.settings.sketchify_timeout
        )
        self.max_output_length = max_output_length
        self.registry = CommandRegistry()
        for spec in self._command_specs():
            self.registry.register(spec)

    # Handlers ----------------------------------------------------------
    def _clap(self, argument: str) -> Response:
        return TextResponse(clap(argument))

    def _fullwidth(self, argument: str) -> Response:
        return TextResponse(fullwidth(argument))

    def _help(self, argument: str) -> Response:
        entries: List[HelpEntry] = [
            HelpEntry(name=spec.name, usage=spec.usage, summary=spec.summary, aliases=spec.aliases)
            for spec in self.registry
        ]
        return HelpResponse(tuple(entries))

    def _info(self, argument: str) -> Response:
        response: InfoResponse = info(
            self.start_time,
            version=__version__,
            homepage=self.settings.homepage,
            now=self._clock(),
        )
        logger.debug("Uptime since %s is %s", self.start_time, response.uptime_label)
        return response

    def _ping(self, argument: str) -> Response:
        return TextResponse(ping())

    def _react(self, argument: str) -> Response:
        return ReactResponse(react(argument))

    def _sketchify(self, argument: str) -> Response:
        return LinkResponse(sketchify(argument, self._fetch))

    def _spongebob(self, argument: str) -> Response:
        return TextResponse(spongebob(argument))

    def _zalgo(self, argument: str) -> Response:
        return TextResponse(
            zalgo(
                argument,
                self.max_output_length,
                rng=self._rng,
                limit=self.settings.zalgo_marks_per_char,
            )
        )

    def _command_specs(self) -> List[CommandSpec]:
        return [
            CommandSpec(
                "clap",
                self._clap,
                summary="Put 👏 clap 👏 emojis 👏 between 👏 words.",
            ),
            CommandSpec(
                "fullwidth",
                self._fullwidth,
                summary="Convert text to ｖａｐｏｒｗａｖｅ text.",
                aliases=("vape", "wavy"),
            ),
            CommandSpec(
                "help",
                self._help,
                argument=ArgumentKind.NONE,
                summary="List the available commands.",
            ),
            CommandSpec(
                "info",
                self._info,
                argument=ArgumentKind.NONE,
                summary="Show the version and uptime of this bot instance.",
            ),
            CommandSpec(
                "ping",
                self._ping,
                argument=ArgumentKind.NONE,
                summary="Check that the bot is alive.",
            ),
            CommandSpec(
                "react",
                self._react,
                argument=ArgumentKind.WORD,
                summary="React to the previous message with emojis spelling out a word.",
            ),
            CommandSpec(
                "sketchify",
                self._sketchify,
                argument=ArgumentKind.WORD,
                summary="Turn a link into a much sketchier looking one.",
                blocking=True,
            ),
            CommandSpec(
                "spongebob",
                self._spongebob,
                summary="CoNvErT tExT tO sPoNgEbOb-CaSe TeXt.",
            ),
            CommandSpec(
                "zalgo",
                self._zalgo,
                summary="H̛̹͝e̳̼͙ ̤̎͝c͓̺̎ȏ͇ͤm̨͡͠e͚ͫ͡s͗ͭ͢",
            ),
        ]

    # Dispatch ----------------------------------------------------------
    def resolve(self, name: str) -> CommandSpec:
        spec = self.registry.get(name)
        if spec is None:
            raise UnknownCommandError(name)
        return spec

    def run(self, spec: CommandSpec, argument: str = "") -> Response:
        """Run an already resolved command, enforcing its argument contract."""

        argument = argument.strip()
        if spec.argument is ArgumentKind.NONE:
            argument = ""
        elif spec.argument is ArgumentKind.WORD and any(char.isspace() for char in argument):
            raise WhitespaceError(spec.name, argument)
        return spec.handler(argument)

    def execute(self, name: str, argument: str = "") -> Response:
        """Execute the command called ``name`` with ``argument``.

        Raises :class:`~hatysa.errors.UnknownCommandError` for unknown names
        and other :class:`~hatysa.errors.CommandError` subclasses when the
        command rejects its argument.
        """

        return self.run(self.resolve(name), argument)


__all__ = ["Backend", "CommandRegistry"]
