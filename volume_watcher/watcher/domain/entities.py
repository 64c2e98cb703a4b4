"""Core data structures exchanged between the connection and the watcher."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto


class ConnectionState(Enum):
    """Coarse lifecycle of the audio-server connection."""
    CONNECTING = "connecting"
    READY = "ready"
    FAILED = "failed"
    TERMINATED = "terminated"


class EventCategory(Enum):
    """Facility a change notification belongs to."""
    DEVICE = "device"
    SERVER = "server"
    OTHER = "other"


class ChangeKind(Enum):
    """What happened to the object named by a notification."""
    NEW = "new"
    CHANGE = "change"
    REMOVE = "remove"


class SubscriptionMask(Flag):
    """Notification categories a subscribe request can ask for."""
    DEVICE = auto()
    SERVER = auto()


@dataclass(slots=True, frozen=True)
class ServerInfo:
    default_device_name: str | None


@dataclass(slots=True, frozen=True)
class DeviceSnapshot:
    """Point-in-time state of one output device.

    ``averaged_amplitude`` is the channel average in server-native volume
    units, where ``NORMAL_AMPLITUDE`` means 100%.
    """
    name: str
    averaged_amplitude: int
    muted: bool


__all__ = [
    "ChangeKind",
    "ConnectionState",
    "DeviceSnapshot",
    "EventCategory",
    "ServerInfo",
    "SubscriptionMask",
]
