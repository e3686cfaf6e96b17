"""Persistence for the guilds the bot belongs to."""
from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path
from typing import List, Optional

from .models import GuildRecord

logger = logging.getLogger(__name__)

# Guild ids are 64-bit unsigned snowflakes; SQLite integers are signed, so
# the id is kept as TEXT.
_DB_SCHEMA = """
CREATE TABLE IF NOT EXISTS guild (
    id TEXT PRIMARY KEY NOT NULL,
    name TEXT NOT NULL
);
"""


class GuildStore:
    """High level interface over the guild table."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._ensure_schema()

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _ensure_schema(self) -> None:
        with closing(sqlite3.connect(self._db_path)) as conn:
            conn.executescript(_DB_SCHEMA)
            conn.commit()

    def upsert_guild(self, guild: GuildRecord) -> bool:
        """Insert ``guild``, or rename the existing row with the same id.

        Returns ``True`` when a row was inserted or its name changed.
        """

        with closing(sqlite3.connect(self._db_path)) as conn:
            row = conn.execute("SELECT name FROM guild WHERE id = ?", (guild.id,)).fetchone()
            if row is not None and row[0] == guild.name:
                return False
            conn.execute(
                "INSERT INTO guild (id, name) VALUES (?, ?) "
                "ON CONFLICT(id) DO UPDATE SET name = excluded.name",
                (guild.id, guild.name),
            )
            conn.commit()
        if row is None:
            logger.info("Recorded new guild %s (%s)", guild.id, guild.name)
        else:
            logger.info("Renamed guild %s from %r to %r", guild.id, row[0], guild.name)
        return True

    def get_guild(self, guild_id: str) -> Optional[GuildRecord]:
        with closing(sqlite3.connect(self._db_path)) as conn:
            row = conn.execute("SELECT id, name FROM guild WHERE id = ?", (guild_id,)).fetchone()
        if not row:
            return None
        return GuildRecord(id=row[0], name=row[1])

    def all_guilds(self) -> List[GuildRecord]:
        with closing(sqlite3.connect(self._db_path)) as conn:
            rows = conn.execute("SELECT id, name FROM guild ORDER BY id").fetchall()
        return [GuildRecord(id=row[0], name=row[1]) for row in rows]


__all__ = ["GuildStore"]
