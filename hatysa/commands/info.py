"""Provide some info about the currently running instance of the bot."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from ..models import InfoResponse


def split_uptime(uptime: timedelta) -> Tuple[int, int, int, int]:
    """Break a duration into (days, hours, minutes, seconds)."""

    total = max(0, int(uptime.total_seconds()))
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)
    return days, hours, minutes, seconds


def info(
    start_time: datetime,
    *,
    version: str,
    homepage: str,
    now: Optional[datetime] = None,
) -> InfoResponse:
    now = now or datetime.now(timezone.utc)
    return InfoResponse(
        version=version,
        uptime=split_uptime(now - start_time),
        homepage=homepage,
    )


__all__ = ["info", "split_uptime"]
