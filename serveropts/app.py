"""Command line entry point printing servers built with options."""

from __future__ import annotations

import argparse
import logging
from datetime import timedelta
from pathlib import Path
from typing import Sequence

from .config import AppConfig, load_config, seconds_to_duration
from .models import Server
from .options import new, with_host, with_max_idle_connections

LOG = logging.getLogger(__name__)


def demo_servers() -> list[Server]:
    """Servers showing defaults, single and combined overrides, and a custom option."""

    def _custom(server: Server) -> None:
        server.name = "new Name"
        server.max_session_duration = timedelta(microseconds=50)
        server.host = "https://another-host"

    return [
        new(),
        new(with_host("https://another-host.eu")),
        new(
            with_host("https://eu.ru"),
            with_max_idle_connections(50),
        ),
        new(_custom),
    ]


def build_server(config: AppConfig) -> Server:
    """Build a single server from the configured overrides."""

    return new(*config.server_options())


def _duration_arg(text: str) -> timedelta:
    try:
        seconds = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid duration: {text!r}") from None
    duration = seconds_to_duration(seconds)
    if duration is None:
        raise argparse.ArgumentTypeError(f"duration out of range: {text!r}")
    return duration


def _count_arg(text: str) -> int:
    try:
        count = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid count: {text!r}") from None
    if count < 0:
        raise argparse.ArgumentTypeError(f"count must not be negative: {text!r}")
    return count


def _resolve_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""

    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="serveropts", description=__doc__)
    parser.add_argument("--config", type=Path, help="Path to a TOML config file.")
    parser.add_argument("--log-level", help="Logging level, overrides the config file.")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("demo", help="Print the example servers.")
    build = commands.add_parser("build", help="Print one server built from config and flags.")
    build.add_argument("--name")
    build.add_argument("--host")
    build.add_argument(
        "--max-idle-connections",
        type=_count_arg,
        help="Idle connection limit; negative values are rejected, as in the config file.",
    )
    build.add_argument(
        "--max-session-duration",
        type=_duration_arg,
        metavar="SECONDS",
        help="Session duration in seconds; must be finite.",
    )
    return parser


def _apply_flags(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    if args.log_level:
        config = config.with_log_level(args.log_level.upper())
    if args.command != "build":
        return config
    updates: dict[str, object] = {}
    if args.name is not None:
        updates["name"] = args.name
    if args.host is not None:
        updates["host"] = args.host
    if args.max_idle_connections is not None:
        updates["max_idle_connections"] = args.max_idle_connections
    if args.max_session_duration is not None:
        updates["max_session_duration"] = args.max_session_duration
    if updates:
        config = config.with_server(**updates)
    return config


def main(argv: Sequence[str] | None = None) -> None:
    """Parse arguments and print the requested servers."""

    args = _build_parser().parse_args(argv)
    config = _apply_flags(load_config(args.config), args)
    logging.basicConfig(level=_resolve_level(config.log_level))
    LOG.debug("Running command", extra={"command": args.command or "demo"})

    if args.command == "build":
        servers = [build_server(config)]
    else:
        servers = demo_servers()
    for server in servers:
        print(server)


if __name__ == "__main__":
    main()
