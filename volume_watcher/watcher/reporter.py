"""Volume reporter: validates device-state results and writes the output line."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from volume_watcher.core.logging_utils import get_module_logger

from .domain.constants import NORMAL_AMPLITUDE, OUTPUT_LINE_FORMAT
from .domain.entities import DeviceSnapshot
from .domain.state import ProcessState

logger = get_module_logger("VolumeReporter")


def amplitude_to_percent(averaged_amplitude: int, normal: int = NORMAL_AMPLITUDE) -> int:
    """Map a server-native volume onto 0..100 (and above) linearly.

    The server's scale is cubic, but the value is only ever displayed, so a
    straight ratio against the normal volume is what gets shown.
    """
    return round(averaged_amplitude * 100 / normal)


def format_line(percent: int, muted: bool) -> str:
    return OUTPUT_LINE_FORMAT.format(percent=percent, muted=int(muted))


class VolumeReporter:
    """Dispatches device-state queries and prints accepted results.

    A result is accepted only if it names the device that is default *now*;
    anything else is a stale answer to a query issued before the default
    moved, and is dropped without output.
    """

    def __init__(self, state: ProcessState, output: Optional[TextIO] = None) -> None:
        self.state = state
        self._output = output

    @property
    def output(self) -> TextIO:
        # Resolved late so redirected/captured stdout is honoured.
        return self._output if self._output is not None else sys.stdout

    def request_update(self, name: str) -> None:
        self.state.connection.query_device_info_by_name(name, self.on_device_info)

    def on_device_info(self, snapshot: Optional[DeviceSnapshot], is_end_of_results: bool) -> None:
        if is_end_of_results or snapshot is None:
            return

        if snapshot.name != self.state.default_device_name:
            logger.debug(
                "Dropping stale result for %s (default is %s)",
                snapshot.name,
                self.state.default_device_name,
            )
            return

        percent = amplitude_to_percent(snapshot.averaged_amplitude)
        stream = self.output
        stream.write(format_line(percent, snapshot.muted) + "\n")
        stream.flush()
