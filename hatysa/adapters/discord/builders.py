"""Discord embed builders.

Pure construction helpers for the embeds the bot sends. Keeping these in a
separate module makes them easy to unit test.
"""

from __future__ import annotations

from typing import Optional

import discord

from ...config import Settings
from ...models import HelpResponse, InfoResponse

BOT_NAME = "Hatysa"
OK_EMOJI = "\N{SQUARED OK}"


def _base_embed(settings: Settings, *, avatar_url: Optional[str], url: str) -> discord.Embed:
    embed = discord.Embed(colour=discord.Colour.from_rgb(*settings.embed_colour))
    embed.set_author(name=BOT_NAME, url=url, icon_url=avatar_url)
    return embed


def build_info_embed(
    response: InfoResponse, settings: Settings, *, avatar_url: Optional[str] = None
) -> discord.Embed:
    """Construct the embed shown by the ``info`` command."""

    embed = _base_embed(settings, avatar_url=avatar_url, url=response.homepage)
    embed.add_field(name="Version", value=response.version, inline=True)
    embed.add_field(name="Uptime", value=response.uptime_label, inline=True)
    embed.add_field(name="Homepage", value=response.homepage, inline=False)
    return embed


def build_help_embed(
    response: HelpResponse,
    settings: Settings,
    *,
    prefix: str,
    avatar_url: Optional[str] = None,
) -> discord.Embed:
    embed = _base_embed(settings, avatar_url=avatar_url, url=settings.homepage)
    embed.title = "Commands"
    for entry in response.entries:
        value = entry.summary or "No description."
        if entry.aliases:
            aliases = ", ".join(f"`{prefix}{alias}`" for alias in entry.aliases)
            value = f"{value}\nAlso: {aliases}"
        embed.add_field(name=f"{prefix}{entry.usage}", value=value, inline=False)
    embed.set_footer(text="The prefix is optional in direct messages.")
    return embed


def build_error_embed(
    message: str,
    settings: Settings,
    *,
    avatar_url: Optional[str] = None,
) -> discord.Embed:
    """Construct the embed used to report a failed command to the user."""

    embed = _base_embed(settings, avatar_url=avatar_url, url=settings.issue_tracker)
    embed.add_field(name="Error", value=message, inline=False)
    minutes = max(1, round(settings.error_dismiss_seconds / 60))
    embed.set_footer(text=f"Click OK within {minutes} mins to delete.")
    return embed


__all__ = ["BOT_NAME", "OK_EMOJI", "build_error_embed", "build_help_embed", "build_info_embed"]
