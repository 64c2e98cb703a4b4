"""Watcher runtime: wires the components onto one connection and runs until exit."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, TextIO

from volume_watcher.core.logging_utils import LoggerLike, ensure_structured_logger

from .activator import SubscriptionActivator
from .correlator import EventCorrelator
from .domain.constants import EXIT_OK
from .domain.errors import ConnectError
from .domain.state import ProcessState
from .lifecycle import ConnectionLifecycle
from .reporter import VolumeReporter
from .tracker import DefaultDeviceTracker

if TYPE_CHECKING:
    from volume_watcher.connection.base import AudioServerConnection


class VolumeWatcher:
    """Owns the process state and the component graph.

    Usage:
        watcher = VolumeWatcher(PulseConnection())
        status = await watcher.run()
    """

    def __init__(
        self,
        connection: "AudioServerConnection",
        *,
        output: Optional[TextIO] = None,
        logger: LoggerLike = None,
    ) -> None:
        self.logger = ensure_structured_logger(logger, fallback_name="VolumeWatcher")
        self.connection = connection
        self.state = ProcessState(connection)

        self.reporter = VolumeReporter(self.state, output)
        self.tracker = DefaultDeviceTracker(self.state, self.reporter)
        self.correlator = EventCorrelator(self.state, self.tracker, self.reporter)
        self.activator = SubscriptionActivator(self.state, self.correlator)
        self.tracker.activator = self.activator
        self.lifecycle = ConnectionLifecycle(self.state, self.tracker)

    async def run(self) -> int:
        """Connect, process events until an exit is requested, then clean up."""
        self.connection.set_state_callback(self.lifecycle.on_state_change)
        try:
            self.connection.connect()
        except ConnectError as exc:
            self.state.fail(exc)

        try:
            status = await self.state.wait_for_exit()
        finally:
            await self.connection.close()
            self.state.release()

        self.logger.info("Watcher stopped with status %d", status)
        return status

    async def shutdown(self) -> None:
        """Orderly, externally requested stop."""
        self.logger.info("Shutdown requested")
        self.state.request_exit(EXIT_OK)


__all__ = ["VolumeWatcher"]
