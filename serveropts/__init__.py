"""Server configuration built from a default value and optional mutators."""

from __future__ import annotations

from .durations import format_duration
from .models import Server, default_server
from .options import (
    Option,
    new,
    with_host,
    with_max_idle_connections,
    with_max_session_duration,
    with_name,
)

__version__ = "0.1.0"

__all__ = [
    "Option",
    "Server",
    "__version__",
    "default_server",
    "format_duration",
    "new",
    "with_host",
    "with_max_idle_connections",
    "with_max_session_duration",
    "with_name",
]
