"""Default-device tracker: the only writer of ``ProcessState.default_device_name``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from volume_watcher.core.logging_utils import get_module_logger

from .domain.entities import ServerInfo
from .domain.errors import AllocationFailure
from .domain.state import ProcessState

if TYPE_CHECKING:
    from .activator import SubscriptionActivator
    from .reporter import VolumeReporter

logger = get_module_logger("DefaultDeviceTracker")


class DefaultDeviceTracker:
    """Receives server-info results and acts on real default-device changes.

    Repeated results naming the current default are no-ops. A real change
    stores the new name, activates the subscription the first time round and
    dispatches exactly one device-state query for the new default.
    """

    def __init__(
        self,
        state: ProcessState,
        reporter: "VolumeReporter",
        activator: Optional["SubscriptionActivator"] = None,
    ) -> None:
        self.state = state
        self.reporter = reporter
        self.activator = activator

    def on_server_info(self, info: ServerInfo) -> None:
        candidate = info.default_device_name
        current = self.state.default_device_name

        if current is not None and candidate == current:
            return

        if candidate is None:
            self.state.fail(AllocationFailure("Server reported no default device name to store"))
            return

        self.state.default_device_name = candidate
        logger.info("Default device: %s -> %s", current, candidate)

        if not self.state.subscription_active and self.activator is not None:
            self.activator.activate_once()

        self.reporter.request_update(candidate)
