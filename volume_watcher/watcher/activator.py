"""Subscription activator: turns change notifications on exactly once."""

from __future__ import annotations

from volume_watcher.core.logging_utils import get_module_logger

from .correlator import EventCorrelator
from .domain.entities import SubscriptionMask
from .domain.errors import SubscribeFailure
from .domain.state import ProcessState

logger = get_module_logger("SubscriptionActivator")

SUBSCRIPTION_MASK = SubscriptionMask.DEVICE | SubscriptionMask.SERVER


class SubscriptionActivator:
    def __init__(self, state: ProcessState, correlator: EventCorrelator) -> None:
        self.state = state
        self.correlator = correlator

    def activate_once(self) -> None:
        if self.state.subscription_active:
            return
        # Flag flips on dispatch, not on completion.
        self.state.subscription_active = True

        connection = self.state.connection
        connection.set_subscribe_callback(self.correlator.on_notification)
        connection.subscribe(SUBSCRIPTION_MASK, self.on_subscribe_result)
        logger.debug("Subscribe request issued for %s", SUBSCRIPTION_MASK)

    def on_subscribe_result(self, success: bool) -> None:
        if not success:
            self.state.fail(SubscribeFailure("Subscribing to device and server events failed"))
