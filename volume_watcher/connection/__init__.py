"""
Audio-server connections.

``AudioServerConnection`` is the contract the watcher programs against.
The PulseAudio implementation lives in ``volume_watcher.connection.pulse``
and is imported explicitly, since importing pulsectl loads libpulse.
"""

from .base import (
    AudioServerConnection,
    DeviceInfoCallback,
    NotificationCallback,
    ServerInfoCallback,
    StateCallback,
    SuccessCallback,
)

__all__ = [
    "AudioServerConnection",
    "DeviceInfoCallback",
    "NotificationCallback",
    "ServerInfoCallback",
    "StateCallback",
    "SuccessCallback",
]
