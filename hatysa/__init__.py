"""Hatysa is a Discord bot that implements a few fun commands.

The command backend is usable without Discord::

    from hatysa import Backend

    backend = Backend()
    backend.execute("spongebob", "hello there")
"""

__version__ = "0.5.0"

from .core import Backend, CommandRegistry  # noqa: E402
from .errors import CommandError, UnknownCommandError, ValidationError  # noqa: E402

__all__ = [
    "Backend",
    "CommandError",
    "CommandRegistry",
    "UnknownCommandError",
    "ValidationError",
    "__version__",
]
