"""
Audio-server connection contract.

The watcher never talks to the audio server directly. It issues
fire-and-forget requests through an object implementing
``AudioServerConnection`` and receives every result as a plain callback on
the event-loop thread. Completion order across requests is not guaranteed
to follow dispatch order.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from volume_watcher.watcher.domain.entities import (
    ChangeKind,
    ConnectionState,
    DeviceSnapshot,
    EventCategory,
    ServerInfo,
    SubscriptionMask,
)


# Callback types
StateCallback = Callable[[ConnectionState], None]
NotificationCallback = Callable[[EventCategory, ChangeKind], None]
ServerInfoCallback = Callable[[ServerInfo], None]
# (snapshot, is_end_of_results); snapshot is None on the end marker
DeviceInfoCallback = Callable[[Optional[DeviceSnapshot], bool], None]
SuccessCallback = Callable[[bool], None]


class AudioServerConnection(Protocol):
    """Opaque connection to the audio server."""

    def set_state_callback(self, callback: StateCallback) -> None:
        """Register the receiver of connection state changes."""
        ...

    def set_subscribe_callback(self, callback: NotificationCallback) -> None:
        """Register the receiver of change notifications."""
        ...

    def connect(self) -> None:
        """Start connecting. Raises ``ConnectError`` if that is impossible."""
        ...

    def query_server_info(self, callback: ServerInfoCallback) -> None:
        ...

    def query_device_info_by_name(self, name: str, callback: DeviceInfoCallback) -> None:
        ...

    def subscribe(self, mask: SubscriptionMask, callback: SuccessCallback) -> None:
        ...

    async def close(self) -> None:
        """Drop the connection and every outstanding request."""
        ...


__all__ = [
    "AudioServerConnection",
    "DeviceInfoCallback",
    "NotificationCallback",
    "ServerInfoCallback",
    "StateCallback",
    "SuccessCallback",
]
