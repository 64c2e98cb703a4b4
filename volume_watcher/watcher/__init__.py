"""Default-sink volume watcher: the event-correlation core."""

from .activator import SUBSCRIPTION_MASK, SubscriptionActivator
from .correlator import EventCorrelator
from .lifecycle import ConnectionLifecycle
from .reporter import VolumeReporter, amplitude_to_percent, format_line
from .runtime import VolumeWatcher
from .tracker import DefaultDeviceTracker

__all__ = [
    "ConnectionLifecycle",
    "DefaultDeviceTracker",
    "EventCorrelator",
    "SUBSCRIPTION_MASK",
    "SubscriptionActivator",
    "VolumeReporter",
    "VolumeWatcher",
    "amplitude_to_percent",
    "format_line",
]
