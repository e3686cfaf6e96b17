"""Discord adapter: event handling and embed builders."""

from __future__ import annotations

from .builders import build_error_embed, build_help_embed, build_info_embed
from .handlers import MessageHandler, parse_invocation

__all__ = [
    "MessageHandler",
    "build_error_embed",
    "build_help_embed",
    "build_info_embed",
    "parse_invocation",
]
