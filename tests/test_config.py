"""Tests for AppConfig helpers."""

from __future__ import annotations

import logging
from datetime import timedelta
from pathlib import Path

import pytest

from serveropts import config as config_module
from serveropts import new
from serveropts.config import AppConfig, ServerOverrides, load_config, seconds_to_duration


def test_server_options_empty_by_default() -> None:
    config = AppConfig()

    assert config.server_options() == []
    assert new(*config.server_options()) == new()


def test_load_config_returns_defaults_when_missing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "config.toml")

    result = load_config()

    assert result == AppConfig()


def test_load_config_reads_values(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
log_level = "debug"

[server]
name = "edge"
host = "https://eu.example"
max_idle_connections = 50
max_session_duration = 90.5
"""
    )

    result = load_config(config_path)

    assert result.log_level == "DEBUG"
    assert result.server == ServerOverrides(
        name="edge",
        host="https://eu.example",
        max_idle_connections=50,
        max_session_duration=timedelta(seconds=90.5),
    )


def test_load_config_ignores_wrongly_typed_entries(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        """
log_level = 10

[server]
host = 42
max_idle_connections = -1
max_session_duration = "soon"
name = "kept"
"""
    )

    result = load_config(config_path)

    assert result.log_level == "WARNING"
    assert result.server == ServerOverrides(name="kept")


def test_load_config_handles_toml_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("log_level = [unterminated")
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_path)

    result = load_config()

    assert result == AppConfig()


def test_server_options_build_configured_server() -> None:
    config = AppConfig(server=ServerOverrides(host="https://eu.ru", max_idle_connections=50))

    server = new(*config.server_options())

    assert server.host == "https://eu.ru"
    assert server.max_idle_connections == 50
    assert server.name == "default"
    assert server.max_session_duration == timedelta(minutes=5)


def test_with_server_keeps_existing_overrides() -> None:
    config = AppConfig(server=ServerOverrides(name="edge", host="https://a"))

    updated = config.with_server(host="https://b")

    assert updated.server.name == "edge"
    assert updated.server.host == "https://b"
    assert config.server.host == "https://a"


def test_with_log_level_updates_field() -> None:
    updated = AppConfig().with_log_level("INFO")

    assert updated.log_level == "INFO"


@pytest.mark.parametrize("value", ["nan", "inf", "-inf", "1e300"])
def test_load_config_skips_unrepresentable_durations(tmp_path: Path, value: str) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text(f'[server]\nname = "kept"\nmax_session_duration = {value}\n')

    result = load_config(config_path)

    assert result.server == ServerOverrides(name="kept")


def test_load_config_handles_invalid_utf8(tmp_path: Path) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_bytes(b'log_level = "\xff"\n')

    result = load_config(config_path)

    assert result == AppConfig()


def test_load_config_logs_unreadable_file(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config_path = tmp_path / "config.toml"
    config_path.write_text("log_level = [unterminated")
    caplog.set_level(logging.WARNING, logger="serveropts.config")

    load_config(config_path)

    assert "Ignoring unreadable config file" in caplog.text


def test_load_config_missing_file_logs_nothing(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="serveropts.config")

    load_config(tmp_path / "absent.toml")

    assert caplog.records == []


def test_seconds_to_duration() -> None:
    assert seconds_to_duration(1.5) == timedelta(seconds=1.5)
    assert seconds_to_duration(-2) == timedelta(seconds=-2)
    assert seconds_to_duration(float("nan")) is None
    assert seconds_to_duration(float("inf")) is None
    assert seconds_to_duration(1e20) is None
