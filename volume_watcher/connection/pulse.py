"""
PulseAudio connection backed by pulsectl-asyncio.

Every request runs as its own asyncio task on the watcher's loop and hands
its result to the caller's callback when it completes. Library exceptions are
translated here so the watcher only ever sees the callback contract:

- a lost connection becomes a ``FAILED`` state change,
- a device that no longer exists becomes an end-of-results,
- a rejected subscription becomes ``callback(False)``.
"""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Optional, Set

import pulsectl
import pulsectl_asyncio

from volume_watcher.core.logging_utils import get_module_logger
from volume_watcher.watcher.domain.constants import DEFAULT_CLIENT_NAME, NORMAL_AMPLITUDE
from volume_watcher.watcher.domain.entities import (
    ChangeKind,
    ConnectionState,
    DeviceSnapshot,
    EventCategory,
    ServerInfo,
    SubscriptionMask,
)
from volume_watcher.watcher.domain.errors import ConnectError

from .base import (
    DeviceInfoCallback,
    NotificationCallback,
    ServerInfoCallback,
    StateCallback,
    SuccessCallback,
)

logger = get_module_logger("PulseConnection")

_MASK_NAMES = (
    (SubscriptionMask.DEVICE, "sink"),
    (SubscriptionMask.SERVER, "server"),
)


def _category_of(event: Any) -> EventCategory:
    if event.facility == pulsectl.PulseEventFacilityEnum.sink:
        return EventCategory.DEVICE
    if event.facility == pulsectl.PulseEventFacilityEnum.server:
        return EventCategory.SERVER
    return EventCategory.OTHER


def _change_kind_of(event: Any) -> ChangeKind:
    if event.t == pulsectl.PulseEventTypeEnum.new:
        return ChangeKind.NEW
    if event.t == pulsectl.PulseEventTypeEnum.remove:
        return ChangeKind.REMOVE
    return ChangeKind.CHANGE


def snapshot_from_sink(sink: Any) -> DeviceSnapshot:
    """Build a DeviceSnapshot from a pulsectl sink info object.

    pulsectl reports per-channel volume as floats where 1.0 is the normal
    volume; the average is converted back to server-native units.
    """
    values = list(sink.volume.values)
    if values:
        raw = [int(round(value * NORMAL_AMPLITUDE)) for value in values]
        averaged = sum(raw) // len(raw)
    else:
        averaged = 0
    return DeviceSnapshot(name=sink.name, averaged_amplitude=averaged, muted=bool(sink.mute))


class PulseConnection:
    """AudioServerConnection implemented on ``pulsectl_asyncio.PulseAsync``."""

    def __init__(self, client_name: str = DEFAULT_CLIENT_NAME, server: Optional[str] = None) -> None:
        self.client_name = client_name
        self.server = server
        self._pulse: Optional[pulsectl_asyncio.PulseAsync] = None
        self._state: Optional[ConnectionState] = None
        self._state_callback: Optional[StateCallback] = None
        self._subscribe_callback: Optional[NotificationCallback] = None
        self._tasks: Set[asyncio.Task] = set()

    # ------------------------------------------------------------------
    # Callback registration

    def set_state_callback(self, callback: StateCallback) -> None:
        self._state_callback = callback

    def set_subscribe_callback(self, callback: NotificationCallback) -> None:
        self._subscribe_callback = callback

    # ------------------------------------------------------------------
    # Lifecycle

    def connect(self) -> None:
        if self._pulse is not None:
            return
        try:
            self._pulse = pulsectl_asyncio.PulseAsync(self.client_name, server=self.server)
        except pulsectl.PulseError as exc:
            raise ConnectError(f"Could not connect to server: {exc}") from exc

        self._set_state(ConnectionState.CONNECTING)
        self._spawn(self._connect(), name="pulse-connect")

    async def _connect(self) -> None:
        try:
            await self._pulse.connect()
        except (pulsectl.PulseError, pulsectl.PulseDisconnected) as exc:
            logger.debug("Connect to %s failed: %s", self.server or "default server", exc)
            self._set_state(ConnectionState.FAILED)
            return
        logger.info("Connected to %s as %s", self.server or "default server", self.client_name)
        self._set_state(ConnectionState.READY)

    async def close(self) -> None:
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()

        if self._pulse is not None:
            self._pulse.close()
            self._pulse = None
            self._set_state(ConnectionState.TERMINATED)

    def _set_state(self, state: ConnectionState) -> None:
        if self._state == state:
            return
        # FAILED and TERMINATED are final
        if self._state in (ConnectionState.FAILED, ConnectionState.TERMINATED):
            return
        self._state = state
        if self._state_callback is not None:
            self._state_callback(state)

    # ------------------------------------------------------------------
    # Requests

    def query_server_info(self, callback: ServerInfoCallback) -> None:
        self._spawn(self._server_info(callback), name="pulse-server-info")

    async def _server_info(self, callback: ServerInfoCallback) -> None:
        try:
            info = await self._pulse.server_info()
        except pulsectl.PulseDisconnected:
            self._set_state(ConnectionState.FAILED)
            return
        except pulsectl.PulseError as exc:
            logger.warning("Server info request failed: %s", exc)
            self._set_state(ConnectionState.FAILED)
            return
        callback(ServerInfo(default_device_name=info.default_sink_name))

    def query_device_info_by_name(self, name: str, callback: DeviceInfoCallback) -> None:
        self._spawn(self._device_info(name, callback), name="pulse-sink-info")

    async def _device_info(self, name: str, callback: DeviceInfoCallback) -> None:
        try:
            sink = await self._pulse.get_sink_by_name(name)
        except pulsectl.PulseDisconnected:
            self._set_state(ConnectionState.FAILED)
            return
        except pulsectl.PulseError as exc:
            logger.debug("No device info for %s: %s", name, exc)
            callback(None, True)
            return
        callback(snapshot_from_sink(sink), False)
        callback(None, True)

    def subscribe(self, mask: SubscriptionMask, callback: SuccessCallback) -> None:
        masks = [label for flag, label in _MASK_NAMES if flag in mask]
        self._spawn(self._listen(masks, callback), name="pulse-events")

    async def _listen(self, masks: list[str], callback: SuccessCallback) -> None:
        # The subscription is confirmed by the first event it delivers.
        confirmed = False
        try:
            async for event in self._pulse.subscribe_events(*masks):
                if not confirmed:
                    confirmed = True
                    callback(True)
                if self._subscribe_callback is not None:
                    self._subscribe_callback(_category_of(event), _change_kind_of(event))
        except pulsectl.PulseDisconnected:
            self._set_state(ConnectionState.FAILED)
        except pulsectl.PulseError as exc:
            logger.debug("Event subscription for %s ended: %s", masks, exc)
            if confirmed:
                self._set_state(ConnectionState.FAILED)
            else:
                callback(False)

    # ------------------------------------------------------------------
    # Task bookkeeping

    def _spawn(self, coro: Coroutine[Any, Any, None], *, name: str) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Request task %s crashed: %s", task.get_name(), exc, exc_info=exc)


__all__ = ["PulseConnection", "snapshot_from_sink"]
