"""The single long-lived state object shared by every watcher component."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from volume_watcher.core.logging_utils import get_module_logger

from .errors import WatcherError

if TYPE_CHECKING:
    from volume_watcher.connection.base import AudioServerConnection

logger = get_module_logger("ProcessState")


class ProcessState:
    """Holds the connection, the current default device and the exit request.

    One instance exists per process. ``default_device_name`` is written only by
    the default-device tracker and ``subscription_active`` only by the
    subscription activator; everything else reads them.
    """

    def __init__(self, connection: "AudioServerConnection") -> None:
        self.connection = connection
        self.default_device_name: str | None = None
        self.subscription_active: bool = False
        self.exit_status: int | None = None
        self._exit_requested = asyncio.Event()

    def request_exit(self, status: int) -> None:
        """Ask the event loop to stop. The first request decides the status."""
        if self.exit_status is not None:
            logger.debug("Exit already requested (status %d); ignoring %d", self.exit_status, status)
            return
        self.exit_status = status
        self._exit_requested.set()

    def fail(self, error: WatcherError) -> None:
        """Report a fatal condition on stderr and request a failing exit."""
        logger.error("%s: %s", type(error).__name__, error)
        self.request_exit(error.exit_status)

    async def wait_for_exit(self) -> int:
        await self._exit_requested.wait()
        return self.exit_status

    def release(self) -> None:
        self.default_device_name = None
        self.connection = None


__all__ = ["ProcessState"]
