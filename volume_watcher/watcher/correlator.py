"""Event correlator: turns change notifications into follow-up queries."""

from __future__ import annotations

from volume_watcher.core.logging_utils import get_module_logger

from .domain.entities import ChangeKind, EventCategory
from .domain.state import ProcessState
from .reporter import VolumeReporter
from .tracker import DefaultDeviceTracker

logger = get_module_logger("EventCorrelator")


class EventCorrelator:
    """Reacts to CHANGE notifications only.

    A server change re-runs discovery, since it may or may not mean a new
    default. A device change queries the *current default* whichever device
    actually changed; results for other devices never reach the output
    because the reporter checks the name again.
    """

    def __init__(self, state: ProcessState, tracker: DefaultDeviceTracker, reporter: VolumeReporter) -> None:
        self.state = state
        self.tracker = tracker
        self.reporter = reporter

    def on_notification(self, category: EventCategory, change_kind: ChangeKind) -> None:
        if change_kind is not ChangeKind.CHANGE:
            return

        if category is EventCategory.SERVER:
            self.state.connection.query_server_info(self.tracker.on_server_info)
        elif category is EventCategory.DEVICE:
            name = self.state.default_device_name
            if name is not None:
                self.reporter.request_update(name)
        else:
            logger.debug("Ignoring %s notification", category.value)
