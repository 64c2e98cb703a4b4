"""Fatal error taxonomy. Every one of these ends the process with status 1."""

from __future__ import annotations

from .constants import EXIT_FAILURE


class WatcherError(Exception):
    """Base class for conditions that terminate the watcher."""

    exit_status = EXIT_FAILURE


class ConnectError(WatcherError):
    """The connection to the audio server could not be started."""


class ContextFailure(WatcherError):
    """The audio-server connection failed after it was started."""


class AllocationFailure(WatcherError):
    """The new default device name could not be stored."""


class SubscribeFailure(WatcherError):
    """The server rejected the change-notification subscription."""


__all__ = [
    "AllocationFailure",
    "ConnectError",
    "ContextFailure",
    "SubscribeFailure",
    "WatcherError",
]
