"""Log filter directives.

A directive is a comma separated list of items, each either a bare level
(applied to the root logger) or ``logger=level``::

    info,hatysa=debug,discord.gateway=warn

Level names are case-insensitive; ``trace`` and ``warn`` are accepted as
aliases for ``debug`` and ``warning``, and ``off`` silences a logger.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS: Dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}


def _parse_level(name: str) -> Optional[int]:
    return _LEVELS.get(name.strip().lower())


def parse_directive(directive: str) -> Tuple[int, Dict[str, int], List[str]]:
    """Split a directive into (root level, per-logger levels, rejected items)."""

    root_level = logging.INFO
    overrides: Dict[str, int] = {}
    rejected: List[str] = []
    for raw_item in directive.split(","):
        item = raw_item.strip()
        if not item:
            continue
        if "=" in item:
            name, _, level_name = item.partition("=")
            level = _parse_level(level_name)
            if not name.strip() or level is None:
                rejected.append(item)
                continue
            overrides[name.strip()] = level
            continue
        level = _parse_level(item)
        if level is None:
            # A bare logger name enables everything for that logger.
            overrides[item] = logging.DEBUG
            continue
        root_level = level
    return root_level, overrides, rejected


def configure_logging(directive: str) -> None:
    """Configure the root logger and any per-logger overrides."""

    root_level, overrides, rejected = parse_directive(directive)
    logging.basicConfig(level=root_level, format=_LOG_FORMAT)
    logging.getLogger().setLevel(root_level)
    for name, level in overrides.items():
        logging.getLogger(name).setLevel(level)
    for item in rejected:
        logger.warning("Ignoring invalid log directive item %r", item)


__all__ = ["configure_logging", "parse_directive"]
