"""Server record shared by the builder, config and CLI modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from .durations import format_duration

DEFAULT_NAME = "default"
DEFAULT_HOST = "http://default-eu"
DEFAULT_MAX_IDLE_CONNECTIONS = 20
DEFAULT_MAX_SESSION_DURATION = timedelta(minutes=5)


@dataclass(slots=True)
class Server:
    """Mutable server settings edited in place by options."""

    name: str = DEFAULT_NAME
    host: str = DEFAULT_HOST
    max_idle_connections: int = DEFAULT_MAX_IDLE_CONNECTIONS
    max_session_duration: timedelta = DEFAULT_MAX_SESSION_DURATION

    def __str__(self) -> str:
        duration = format_duration(self.max_session_duration)
        return f"{{{self.name} {self.host} {self.max_idle_connections} {duration}}}"


def default_server() -> Server:
    """Fresh server populated with the built-in defaults."""

    return Server()


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_MAX_IDLE_CONNECTIONS",
    "DEFAULT_MAX_SESSION_DURATION",
    "DEFAULT_NAME",
    "Server",
    "default_server",
]
