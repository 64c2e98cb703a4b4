"""Domain models, constants and errors for the volume watcher."""

from .constants import (
    DEFAULT_CLIENT_NAME,
    EXIT_FAILURE,
    EXIT_OK,
    NORMAL_AMPLITUDE,
    OUTPUT_LINE_FORMAT,
)
from .entities import (
    ChangeKind,
    ConnectionState,
    DeviceSnapshot,
    EventCategory,
    ServerInfo,
    SubscriptionMask,
)
from .errors import (
    AllocationFailure,
    ConnectError,
    ContextFailure,
    SubscribeFailure,
    WatcherError,
)
from .state import ProcessState

__all__ = [
    "AllocationFailure",
    "ChangeKind",
    "ConnectError",
    "ConnectionState",
    "ContextFailure",
    "DEFAULT_CLIENT_NAME",
    "DeviceSnapshot",
    "EXIT_FAILURE",
    "EXIT_OK",
    "EventCategory",
    "NORMAL_AMPLITUDE",
    "OUTPUT_LINE_FORMAT",
    "ProcessState",
    "ServerInfo",
    "SubscribeFailure",
    "SubscriptionMask",
    "WatcherError",
]
