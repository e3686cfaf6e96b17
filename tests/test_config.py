"""Tests for configuration and logging setup."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from hatysa.config import DEFAULT_SETTINGS_PATH, RuntimeConfig, Settings, SettingsLoader
from hatysa.errors import ConfigError
from hatysa.logging_config import configure_logging, parse_directive


def test_packaged_settings_match_defaults():
    settings = SettingsLoader(DEFAULT_SETTINGS_PATH).load()
    assert settings == Settings()


def test_settings_loader_caches(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("commands:\n  zalgo:\n    marks_per_char: 3\n", encoding="utf-8")
    loader = SettingsLoader(path)
    first = loader.load()
    path.write_text("commands:\n  zalgo:\n    marks_per_char: 4\n", encoding="utf-8")
    assert loader.load() is first
    assert loader.load(force=True).zalgo_marks_per_char == 4


def test_settings_partial_file_uses_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("embed:\n  colour: [1, 2, 3]\n", encoding="utf-8")
    settings = SettingsLoader(path).load()
    assert settings.embed_colour == (1, 2, 3)
    assert settings.max_message_length == 2000


def test_settings_rejects_bad_colour():
    with pytest.raises(ConfigError):
        Settings.from_dict({"embed": {"colour": [1, 2]}})


def test_settings_missing_file_is_config_error(tmp_path):
    with pytest.raises(ConfigError):
        SettingsLoader(tmp_path / "missing.yaml").load()


def test_runtime_config_from_env_defaults():
    config = RuntimeConfig.from_env({"DISCORD_TOKEN": "secret"})
    assert config.token == "secret"
    assert config.prefix == ","
    assert config.log_filter == "info"
    assert config.db_path == Path("hatysa.db")
    assert config.started_at.tzinfo is not None
    assert "secret" not in repr(config)


def test_runtime_config_from_env_overrides(tmp_path):
    settings_path = tmp_path / "settings.yaml"
    settings_path.write_text("bot:\n  homepage: https://example.com\n", encoding="utf-8")
    config = RuntimeConfig.from_env(
        {
            "DISCORD_TOKEN": "secret",
            "HATYSA_PREFIX": "!",
            "HATYSA_LOG": "info,hatysa=debug",
            "HATYSA_DB": str(tmp_path / "bot.db"),
            "HATYSA_SETTINGS": str(settings_path),
        }
    )
    assert config.prefix == "!"
    assert config.log_filter == "info,hatysa=debug"
    assert config.db_path == tmp_path / "bot.db"
    assert config.settings.homepage == "https://example.com"


def test_runtime_config_requires_token():
    with pytest.raises(ConfigError):
        RuntimeConfig.from_env({"HATYSA_PREFIX": "!"})


def test_runtime_config_from_process_env(monkeypatch):
    monkeypatch.setenv("DISCORD_TOKEN", "from-env")
    monkeypatch.delenv("HATYSA_PREFIX", raising=False)
    assert RuntimeConfig.from_env().token == "from-env"


def test_parse_directive_levels():
    root, overrides, rejected = parse_directive("warn,hatysa=debug,discord.gateway=ERROR")
    assert root == logging.WARNING
    assert overrides == {"hatysa": logging.DEBUG, "discord.gateway": logging.ERROR}
    assert rejected == []


def test_parse_directive_aliases_and_invalid_items():
    root, overrides, rejected = parse_directive("trace, hatysa.core ,discord=loud,")
    assert root == logging.DEBUG
    assert overrides == {"hatysa.core": logging.DEBUG}
    assert rejected == ["discord=loud"]


def test_parse_directive_off():
    root, _, _ = parse_directive("off")
    assert root > logging.CRITICAL


@pytest.fixture
def restore_levels():
    names = ["", "hatysa"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_configure_logging_applies_levels(restore_levels):
    configure_logging("warn,hatysa=debug")
    assert logging.getLogger().level == logging.WARNING
    assert logging.getLogger("hatysa").level == logging.DEBUG
