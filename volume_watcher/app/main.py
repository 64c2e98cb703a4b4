"""Process entry point: options, logging, signals, then the watcher."""

from __future__ import annotations

import argparse
import asyncio
from typing import TYPE_CHECKING, Optional

from volume_watcher.cli.common import install_exception_handlers, install_signal_handlers
from volume_watcher.core.logging_config import configure_logging
from volume_watcher.core.logging_utils import get_module_logger
from volume_watcher.watcher import VolumeWatcher
from volume_watcher.watcher.config import WatcherSettings, parse_cli_args, resolve_log_level

if TYPE_CHECKING:
    from volume_watcher.connection.base import AudioServerConnection

logger = get_module_logger("Main")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return parse_cli_args(argv)


def build_connection(settings: WatcherSettings) -> "AudioServerConnection":
    # pulsectl loads libpulse on import
    from volume_watcher.connection.pulse import PulseConnection

    return PulseConnection(client_name=settings.client_name, server=settings.server)


async def main(argv: Optional[list[str]] = None) -> int:
    """Run the watcher until it stops and return the process exit status.

    Exit status is 0 after SIGINT/SIGTERM and 1 after any fatal condition
    (connect failure, lost connection, rejected subscription, no default
    device).
    """
    args = parse_args(argv)
    settings = WatcherSettings.from_args(args)

    configure_logging(
        settings.log_level,
        console=settings.console_output,
        log_file=settings.log_file,
    )
    requested_level = str(getattr(args, "log_level", "") or "")
    _, invalid_level = resolve_log_level(requested_level, settings.log_level)
    if invalid_level:
        logger.warning(
            "Unknown log level '%s'; defaulting to %s",
            requested_level,
            settings.log_level,
        )
    logger.debug(
        "Watcher configured (server=%s, client=%s, log_file=%s)",
        settings.server or "default",
        settings.client_name,
        settings.log_file,
    )

    loop = asyncio.get_running_loop()
    install_exception_handlers(logger, loop)

    watcher = VolumeWatcher(build_connection(settings))
    install_signal_handlers(watcher, loop)

    return await watcher.run()


__all__ = ["build_connection", "main", "parse_args"]
