"""Discord bot entry point for Hatysa."""
from __future__ import annotations

import logging
from typing import Optional

import discord
from discord.ext import commands
from dotenv import load_dotenv

from . import __version__
from .adapters.discord import MessageHandler
from .config import RuntimeConfig
from .core import Backend
from .logging_config import configure_logging
from .state import GuildStore

logger = logging.getLogger(__name__)


def _default_intents() -> discord.Intents:
    intents = discord.Intents.default()
    intents.message_content = True
    return intents


def build_bot(
    config: RuntimeConfig,
    intents: Optional[discord.Intents] = None,
    *,
    backend: Optional[Backend] = None,
    store: Optional[GuildStore] = None,
) -> commands.Bot:
    intents = intents or _default_intents()
    bot = commands.Bot(
        command_prefix=config.prefix,
        intents=intents,
        help_command=None,
        activity=discord.Game(name=f"{config.prefix}help"),
    )
    backend = backend or Backend(
        settings=config.settings,
        start_time=config.started_at,
        max_output_length=config.settings.max_message_length,
    )
    store = store or GuildStore(config.db_path)
    handler = MessageHandler(backend, config, store, client=bot)
    setattr(bot, "hatysa_handler", handler)

    @bot.event
    async def on_ready() -> None:
        logger.info("%s is connected!", bot.user)
        for guild in bot.guilds:
            handler.record_guild(guild)

    # Replaces commands.Bot.on_message; commands are dispatched by the backend registry.
    @bot.event
    async def on_message(message: discord.Message) -> None:
        await handler.handle_message(message)

    @bot.event
    async def on_guild_join(guild: discord.Guild) -> None:
        logger.info("Joined guild %s (%s)", guild.id, guild.name)
        handler.record_guild(guild)

    @bot.event
    async def on_guild_update(before: discord.Guild, after: discord.Guild) -> None:
        if before.name != after.name:
            handler.record_guild(after)

    return bot


def main() -> None:
    load_dotenv()
    config = RuntimeConfig.from_env()
    configure_logging(config.log_filter)
    logger.info("Starting hatysa %s at %s", __version__, config.started_at.isoformat())
    bot = build_bot(config)
    bot.run(config.token, log_handler=None)


__all__ = ["build_bot", "main"]
