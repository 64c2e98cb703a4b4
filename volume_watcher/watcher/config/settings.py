"""Configuration loading + normalization helpers for the watcher entry point."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from volume_watcher.cli.common import LOG_LEVELS, add_common_cli_arguments
from volume_watcher.watcher.domain.constants import DEFAULT_CLIENT_NAME

_LEVEL_ALIASES = {
    "warn": "warning",
    "fatal": "critical",
    "err": "error",
}


def resolve_log_level(value: str | None, default: str) -> tuple[str, bool]:
    """Normalize a user-supplied log level.

    Returns the effective level and whether the input had to be rejected.
    """
    normalized = (value or "").strip().lower()
    if not normalized:
        return default, False
    normalized = _LEVEL_ALIASES.get(normalized, normalized)
    if normalized in LOG_LEVELS:
        return normalized, False
    return default, True


@dataclass(slots=True)
class WatcherSettings:
    """Normalized startup options derived from CLI args."""

    log_level: str = "warning"
    log_file: Path | None = None
    console_output: bool = True
    server: str | None = None
    client_name: str = DEFAULT_CLIENT_NAME

    @classmethod
    def from_args(cls, args: Any) -> "WatcherSettings":
        """Create a settings instance from an argparse namespace."""

        defaults = cls()

        log_file = getattr(args, "log_file", None)
        if log_file is not None and not isinstance(log_file, Path):
            log_file = Path(str(log_file))

        server = getattr(args, "server", None) or None
        client_name = getattr(args, "client_name", None) or defaults.client_name
        level, _ = resolve_log_level(getattr(args, "log_level", None), defaults.log_level)

        return cls(
            log_level=level,
            log_file=log_file,
            console_output=bool(getattr(args, "console_output", defaults.console_output)),
            server=str(server) if server else None,
            client_name=str(client_name),
        )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pa-volume-watcher",
        description="Print the default output device's volume and mute state whenever it changes.",
    )
    add_common_cli_arguments(parser, default_log_level=WatcherSettings().log_level)
    parser.add_argument(
        "--server",
        type=str,
        default=None,
        help="Audio server to connect to (default: PULSE_SERVER or the local server)",
    )
    parser.add_argument(
        "--client-name",
        dest="client_name",
        type=str,
        default=DEFAULT_CLIENT_NAME,
        help="Client name announced to the audio server",
    )
    return parser


def parse_cli_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return build_arg_parser().parse_args(argv)


__all__ = [
    "WatcherSettings",
    "build_arg_parser",
    "parse_cli_args",
    "resolve_log_level",
]
