"""CLI configuration loading helpers."""

from __future__ import annotations

import logging
import math
from datetime import timedelta
from pathlib import Path

import tomllib

from pydantic import BaseModel, Field

from .options import (
    Option,
    with_host,
    with_max_idle_connections,
    with_max_session_duration,
    with_name,
)

LOG = logging.getLogger(__name__)

CONFIG_FILE = Path.home() / ".config" / "serveropts" / "config.toml"


class ServerOverrides(BaseModel):
    """Server fields set in the ``[server]`` table; unset fields keep defaults."""

    name: str | None = None
    host: str | None = None
    max_idle_connections: int | None = None
    max_session_duration: timedelta | None = None


class AppConfig(BaseModel):
    """Shape of the configuration file."""

    log_level: str = "WARNING"
    server: ServerOverrides = Field(default_factory=ServerOverrides)

    def server_options(self) -> list[Option]:
        """Options reproducing the overrides, in field order."""

        overrides = self.server
        options: list[Option] = []
        if overrides.name is not None:
            options.append(with_name(overrides.name))
        if overrides.host is not None:
            options.append(with_host(overrides.host))
        if overrides.max_idle_connections is not None:
            options.append(with_max_idle_connections(overrides.max_idle_connections))
        if overrides.max_session_duration is not None:
            options.append(with_max_session_duration(overrides.max_session_duration))
        return options

    def with_log_level(self, level: str) -> AppConfig:
        """Return a copy with the log level updated."""

        return self.model_copy(update={"log_level": level})

    def with_server(self, **updates: object) -> AppConfig:
        """Return a copy with server overrides applied."""

        server = self.server.model_copy(update=updates)
        return self.model_copy(update={"server": server})


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from disk; fall back to defaults if missing."""

    config_path = path or CONFIG_FILE
    try:
        data = _read_config_file(config_path)
    except FileNotFoundError:
        return AppConfig()
    except (tomllib.TOMLDecodeError, UnicodeDecodeError, OSError):
        LOG.warning("Ignoring unreadable config file", extra={"path": str(config_path)})
        return AppConfig()

    return AppConfig(
        log_level=data.get("log_level", AppConfig.model_fields["log_level"].default),
        server=data.get("server", ServerOverrides()),
    )


def seconds_to_duration(seconds: float) -> timedelta | None:
    """Convert seconds to a duration, or ``None`` when not representable."""

    try:
        if not math.isfinite(seconds):
            return None
        return timedelta(seconds=seconds)
    except OverflowError:
        return None


def _read_config_file(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        raw = tomllib.load(handle)
    data: dict[str, object] = {}
    log_level = raw.get("log_level")
    if isinstance(log_level, str):
        data["log_level"] = log_level.upper()
    server = raw.get("server")
    if isinstance(server, dict):
        fields: dict[str, object] = {}
        for key in ("name", "host"):
            value = server.get(key)
            if isinstance(value, str):
                fields[key] = value
        idle = server.get("max_idle_connections")
        if isinstance(idle, int) and not isinstance(idle, bool) and idle >= 0:
            fields["max_idle_connections"] = idle
        duration = server.get("max_session_duration")
        if isinstance(duration, (int, float)) and not isinstance(duration, bool):
            parsed = seconds_to_duration(duration)
            if parsed is not None:
                fields["max_session_duration"] = parsed
        data["server"] = ServerOverrides(**fields)
    return data


__all__ = ["AppConfig", "CONFIG_FILE", "ServerOverrides", "load_config", "seconds_to_duration"]
