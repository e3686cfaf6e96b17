"""Exception types raised by the command backend and the Discord adapter."""
from __future__ import annotations


class CommandError(Exception):
    """Base class for failures while executing a command."""

    @property
    def user_message(self) -> str:
        return "An internal error occurred. Please try again later."


class ValidationError(CommandError):
    """The argument given to a command does not satisfy its contract."""

    def __init__(self, command: str, original: str, reason: str = "invalid argument") -> None:
        super().__init__(f"{command}: {reason}: {original!r}")
        self.command = command
        self.original = original
        self.reason = reason

    @property
    def user_message(self) -> str:
        return f"Invalid input for `{self.command}`: {self.reason}."


class MissingArgumentError(ValidationError):
    def __init__(self, command: str) -> None:
        super().__init__(command, "", "an argument is required")

    @property
    def user_message(self) -> str:
        return f"The `{self.command}` command needs an argument!"


class WhitespaceError(ValidationError):
    def __init__(self, command: str, original: str) -> None:
        super().__init__(command, original, "argument contains whitespace")

    @property
    def user_message(self) -> str:
        return f"The `{self.command}` command takes a single word without spaces!"


class NonAlphanumericError(ValidationError):
    def __init__(self, command: str, original: str) -> None:
        super().__init__(command, original, "argument contains non-alphanumeric characters")

    @property
    def user_message(self) -> str:
        return f"String **{self.original.upper()}** contains non-alphanumeric characters!"


class InvalidUrlError(ValidationError):
    def __init__(self, command: str, original: str) -> None:
        super().__init__(command, original, "argument is not a valid URL")

    @property
    def user_message(self) -> str:
        return "Invalid URL!"


class UnknownCommandError(CommandError):
    """No registered command matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown command {name!r}")
        self.name = name

    @property
    def user_message(self) -> str:
        return f"Unknown command `{self.name}`."


class RequestError(CommandError):
    """A request to an external service made by a command failed."""

    @property
    def user_message(self) -> str:
        return "Failed to complete request. Please try again."


class PlatformError(Exception):
    """A Discord API call failed while rendering a response."""

    @property
    def user_message(self) -> str:
        return "Something went wrong talking to Discord. Please try again."


class ConfigError(RuntimeError):
    """Raised when required configuration is missing or unreadable."""


__all__ = [
    "CommandError",
    "ConfigError",
    "InvalidUrlError",
    "MissingArgumentError",
    "NonAlphanumericError",
    "PlatformError",
    "RequestError",
    "UnknownCommandError",
    "ValidationError",
    "WhitespaceError",
]
