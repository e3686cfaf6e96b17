"""Command execution tracking."""
from __future__ import annotations

import functools
import logging
import time
from typing import Callable

from .models import Response

logger = logging.getLogger(__name__)


def track_command(name: str) -> Callable[[Callable[[str], Response]], Callable[[str], Response]]:
    """Decorator logging the outcome and duration of a command handler."""

    def decorator(func: Callable[[str], Response]) -> Callable[[str], Response]:
        @functools.wraps(func)
        def wrapper(argument: str) -> Response:
            start_time = time.perf_counter()
            success = False
            error_type = None
            try:
                response = func(argument)
                success = True
                return response
            except Exception as exc:
                error_type = type(exc).__name__
                raise
            finally:
                duration_ms = (time.perf_counter() - start_time) * 1000
                if success:
                    logger.debug("Command %s succeeded in %.1fms", name, duration_ms)
                else:
                    logger.info(
                        "Command %s failed with %s after %.1fms",
                        name,
                        error_type,
                        duration_ms,
                    )

        return wrapper

    return decorator


__all__ = ["track_command"]
