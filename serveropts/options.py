"""Options-pattern builder for :class:`~serveropts.models.Server`."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Callable

from .models import Server, default_server

LOG = logging.getLogger(__name__)

Option = Callable[[Server], None]


def new(*options: Option) -> Server:
    """Build a server from the defaults, applying ``options`` in order.

    Each option edits the same record, so a later option overwrites whatever an
    earlier one wrote to the same field.
    """

    server = default_server()
    for option in options:
        option(server)
    LOG.debug("Built server", extra={"server": server.name, "options": len(options)})
    return server


def with_name(name: str) -> Option:
    """Override the server name."""

    def _apply(server: Server) -> None:
        server.name = name

    return _apply


def with_host(host: str) -> Option:
    """Override the default host."""

    def _apply(server: Server) -> None:
        server.host = host

    return _apply


def with_max_idle_connections(count: int) -> Option:
    """Override the idle connection limit."""

    def _apply(server: Server) -> None:
        server.max_idle_connections = count

    return _apply


def with_max_session_duration(duration: timedelta) -> Option:
    """Override how long a session may last."""

    def _apply(server: Server) -> None:
        server.max_session_duration = duration

    return _apply


__all__ = [
    "Option",
    "new",
    "with_host",
    "with_max_idle_connections",
    "with_max_session_duration",
    "with_name",
]
