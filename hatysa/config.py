"""Configuration loading utilities for Hatysa."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

from .errors import ConfigError

DEFAULT_SETTINGS_PATH = Path(__file__).parent / "data" / "settings.yaml"
DEFAULT_PREFIX = ","
DEFAULT_LOG_FILTER = "info"
DEFAULT_DB_PATH = "hatysa.db"


@dataclass(frozen=True)
class Settings:
    """Typed view over the settings YAML file."""

    homepage: str = "https://github.com/nerosnm/hatysa"
    issue_tracker: str = "https://todo.sr.ht/~nerosnm/hatysa"
    embed_colour: Tuple[int, int, int] = (244, 234, 62)
    max_message_length: int = 2000
    zalgo_marks_per_char: int = 10
    sketchify_endpoint: str = "http://verylegit.link/sketchify"
    sketchify_timeout: float = 10.0
    error_dismiss_seconds: float = 300.0

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Settings":
        bot_cfg = data.get("bot", {}) or {}
        embed_cfg = data.get("embed", {}) or {}
        commands_cfg = data.get("commands", {}) or {}
        zalgo_cfg = commands_cfg.get("zalgo", {}) or {}
        sketchify_cfg = commands_cfg.get("sketchify", {}) or {}
        defaults = Settings()
        colour = embed_cfg.get("colour", list(defaults.embed_colour))
        if len(colour) != 3:
            raise ConfigError(f"embed.colour must have three components, got {colour!r}")
        return Settings(
            homepage=str(bot_cfg.get("homepage", defaults.homepage)),
            issue_tracker=str(bot_cfg.get("issue_tracker", defaults.issue_tracker)),
            embed_colour=(int(colour[0]), int(colour[1]), int(colour[2])),
            max_message_length=int(bot_cfg.get("max_message_length", defaults.max_message_length)),
            zalgo_marks_per_char=int(zalgo_cfg.get("marks_per_char", defaults.zalgo_marks_per_char)),
            sketchify_endpoint=str(sketchify_cfg.get("endpoint", defaults.sketchify_endpoint)),
            sketchify_timeout=float(sketchify_cfg.get("timeout", defaults.sketchify_timeout)),
            error_dismiss_seconds=float(
                embed_cfg.get("error_dismiss_seconds", defaults.error_dismiss_seconds)
            ),
        )


class SettingsLoader:
    """Loads and caches settings from YAML configuration files."""

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or DEFAULT_SETTINGS_PATH
        self._cache: Settings | None = None

    @property
    def path(self) -> Path:
        return self._path

    def load(self, force: bool = False) -> Settings:
        if self._cache is not None and not force:
            return self._cache
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"Unable to read settings from {self._path}: {exc}") from exc
        self._cache = Settings.from_dict(data)
        return self._cache


@dataclass(frozen=True)
class RuntimeConfig:
    """Process-wide configuration, read once at startup."""

    token: str = field(repr=False)
    prefix: str = DEFAULT_PREFIX
    log_filter: str = DEFAULT_LOG_FILTER
    db_path: Path = Path(DEFAULT_DB_PATH)
    settings: Settings = field(default_factory=Settings)
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> "RuntimeConfig":
        env = os.environ if env is None else env
        token = env.get("DISCORD_TOKEN")
        if not token:
            raise ConfigError("DISCORD_TOKEN environment variable must be set")
        settings_path = env.get("HATYSA_SETTINGS")
        loader = SettingsLoader(Path(settings_path) if settings_path else None)
        return RuntimeConfig(
            token=token,
            prefix=env.get("HATYSA_PREFIX") or DEFAULT_PREFIX,
            log_filter=env.get("HATYSA_LOG") or DEFAULT_LOG_FILTER,
            db_path=Path(env.get("HATYSA_DB") or DEFAULT_DB_PATH),
            settings=loader.load(),
        )


def get_settings() -> Settings:
    """Convenience accessor for default settings."""

    return SettingsLoader().load()


__all__ = ["RuntimeConfig", "Settings", "SettingsLoader", "get_settings"]
