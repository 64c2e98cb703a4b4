"""Connection lifecycle: start discovery when ready, give up on failure."""

from __future__ import annotations

from volume_watcher.core.logging_utils import get_module_logger

from .domain.entities import ConnectionState
from .domain.errors import ContextFailure
from .domain.state import ProcessState
from .tracker import DefaultDeviceTracker

logger = get_module_logger("ConnectionLifecycle")


class ConnectionLifecycle:
    """Two-outcome state machine: READY starts discovery, FAILED ends the process.

    There is no reconnect path; a supervisor is expected to restart us.
    """

    def __init__(self, state: ProcessState, tracker: DefaultDeviceTracker) -> None:
        self.state = state
        self.tracker = tracker

    def on_state_change(self, new_state: ConnectionState) -> None:
        logger.debug("Connection state -> %s", new_state.value)

        if new_state is ConnectionState.READY:
            self.state.connection.query_server_info(self.tracker.on_server_info)
        elif new_state is ConnectionState.FAILED:
            self.state.fail(ContextFailure("PulseAudio connection failed"))
