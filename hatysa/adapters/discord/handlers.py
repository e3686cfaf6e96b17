"""Handle incoming Discord events.

Messages are inspected to decide whether they invoke a command. Commands are
run through the backend and their responses are written back to Discord.
User-facing failures are reported with an error embed; failures to talk to
Discord are logged.
"""

from __future__ import annotations

import asyncio
import logging
import sqlite3
from typing import Any, Optional, Tuple

import discord

from ...config import RuntimeConfig
from ...core import Backend
from ...errors import CommandError, PlatformError
from ...models import (
    GuildRecord,
    HelpResponse,
    InfoResponse,
    LinkResponse,
    ReactResponse,
    Response,
    TextResponse,
)
from ...state import GuildStore
from .builders import OK_EMOJI, build_error_embed, build_help_embed, build_info_embed

logger = logging.getLogger(__name__)


def _clamp_text(text: str, limit: int) -> str:
    """Ensure Discord-compatible message length."""

    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


def parse_invocation(content: str, prefix: str, *, direct: bool) -> Optional[Tuple[str, str]]:
    """Split message text into ``(command name, argument)``.

    Messages must start with ``prefix`` unless they were sent directly to
    the bot. Returns ``None`` when the message is not a command.
    """

    if prefix and content.startswith(prefix):
        tail = content[len(prefix):]
    elif direct:
        tail = content
    else:
        return None
    parts = tail.strip().split(maxsplit=1)
    if not parts:
        return None
    name = parts[0].lower()
    argument = parts[1].strip() if len(parts) > 1 else ""
    return name, argument


class MessageHandler:
    """Bridges Discord events to the command backend.

    ``client`` is only needed for the bot's avatar and for waiting on the
    reaction that dismisses an error embed; without it those steps are
    skipped.
    """

    def __init__(
        self,
        backend: Backend,
        config: RuntimeConfig,
        store: GuildStore,
        *,
        client: Optional[discord.Client] = None,
    ) -> None:
        self._backend = backend
        self._config = config
        self._store = store
        self._client = client

    @property
    def settings(self):
        return self._config.settings

    def _avatar_url(self) -> Optional[str]:
        user = getattr(self._client, "user", None)
        if user is None:
            logger.debug("Bot user unavailable; sending embed without avatar")
            return None
        return str(user.display_avatar.url)

    # Messages ----------------------------------------------------------
    async def handle_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return
        invocation = parse_invocation(
            message.content, self._config.prefix, direct=message.guild is None
        )
        if invocation is None:
            logger.debug("message id=%s is not a command", message.id)
            return
        name, argument = invocation
        logger.debug("message id=%s is a command (%s), executing", message.id, name)

        try:
            spec = self._backend.resolve(name)
            if spec.blocking:
                response = await asyncio.to_thread(self._backend.run, spec, argument)
            else:
                response = self._backend.run(spec, argument)
        except CommandError as exc:
            logger.info("Failed to execute command in message id=%s: %s", message.id, exc)
            await self.report(message, exc)
            return
        except Exception:
            logger.exception("Unexpected failure running %s for message id=%s", name, message.id)
            await self.report(message, CommandError(f"unexpected failure in {name}"))
            return

        try:
            await self.respond(message, response)
        except PlatformError as exc:
            logger.error("Unable to respond to message id=%s: %s", message.id, exc)
            await self.report(message, exc)
            return
        logger.info("Responded to %s command in message id=%s", name, message.id)

    async def respond(self, message: discord.Message, response: Response) -> None:
        """Write ``response`` back to the channel ``message`` came from."""

        try:
            if isinstance(response, TextResponse):
                await self._send_text(message, response.text)
            elif isinstance(response, ReactResponse):
                await self._react(message, response)
            elif isinstance(response, InfoResponse):
                embed = build_info_embed(response, self.settings, avatar_url=self._avatar_url())
                await message.channel.send(embed=embed)
            elif isinstance(response, HelpResponse):
                embed = build_help_embed(
                    response,
                    self.settings,
                    prefix=self._config.prefix,
                    avatar_url=self._avatar_url(),
                )
                await message.channel.send(embed=embed)
            elif isinstance(response, LinkResponse):
                await message.channel.send(f"{message.author.mention}: <{response.url}>")
                await self._delete_command(message)
            else:
                raise TypeError(f"Unsupported response type {type(response).__name__}")
        except discord.DiscordException as exc:
            raise PlatformError(f"Discord request failed: {exc}") from exc

    async def _send_text(self, message: discord.Message, text: str) -> None:
        if not text.strip():
            logger.debug("Skipping empty reply to message id=%s", message.id)
            return
        await message.channel.send(_clamp_text(text, self.settings.max_message_length))

    async def _react(self, message: discord.Message, response: ReactResponse) -> None:
        target: Optional[discord.Message] = None
        async for previous in message.channel.history(limit=1, before=message):
            target = previous
        if target is None:
            raise PlatformError(f"No message before message id={message.id} to react to")
        for emoji in response.reactions:
            await target.add_reaction(emoji)
        await self._delete_command(message)

    async def _delete_command(self, message: discord.Message) -> None:
        # Fails in DMs and in guilds without Manage Messages.
        try:
            await message.delete()
        except discord.DiscordException as exc:
            logger.warning("Unable to delete command message id=%s: %s", message.id, exc)

    # Errors ------------------------------------------------------------
    async def report(self, message: discord.Message, error: Exception) -> None:
        """Send an error embed and let the author dismiss it with 🆗."""

        user_message = getattr(error, "user_message", None) or str(error)
        logger.warning("Reporting error to user in channel id=%s: %s", message.channel.id, error)
        embed = build_error_embed(user_message, self.settings, avatar_url=self._avatar_url())
        try:
            sent = await message.channel.send(embed=embed)
            await sent.add_reaction(OK_EMOJI)
        except discord.DiscordException:
            logger.exception("Unable to report error for message id=%s", message.id)
            return
        await self._await_dismissal(message, sent)

    async def _await_dismissal(self, message: discord.Message, sent: discord.Message) -> None:
        if self._client is None:
            return

        def _is_ok(reaction: Any, user: Any) -> bool:
            return (
                reaction.message.id == sent.id
                and str(reaction.emoji) == OK_EMOJI
                and user.id == message.author.id
            )

        try:
            await self._client.wait_for(
                "reaction_add", check=_is_ok, timeout=self.settings.error_dismiss_seconds
            )
        except asyncio.TimeoutError:
            logger.info("No reaction received asking to delete error message %s", sent.id)
            try:
                await sent.remove_reaction(OK_EMOJI, self._client.user)
            except discord.DiscordException:
                logger.warning("Unable to delete OK reaction prompt on message %s", sent.id)
            return

        logger.debug("Got an OK reaction on error message %s, deleting", sent.id)
        for target in (sent, message):
            try:
                await target.delete()
            except discord.DiscordException:
                logger.error("Unable to delete message %s", target.id)

    # Guilds ------------------------------------------------------------
    def record_guild(self, guild: discord.Guild) -> None:
        """Insert or rename the stored record for ``guild``."""

        record = GuildRecord(id=str(guild.id), name=guild.name)
        try:
            self._store.upsert_guild(record)
        except sqlite3.Error:
            logger.exception("Failed to record guild %s", record.id)


__all__ = ["MessageHandler", "parse_invocation"]
