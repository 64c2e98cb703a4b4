"""Live test against the audio server of the current session.

Run with ``pytest --run-pulse``; needs a reachable PulseAudio or
PipeWire-pulse server with at least one output device.
"""

from __future__ import annotations

import asyncio
import io
import re

import pytest

LINE_PATTERN = re.compile(r"^volume = \d+ muted = [01]$")


@pytest.mark.pulse
@pytest.mark.asyncio
async def test_reports_initial_volume_and_stops_cleanly():
    from volume_watcher.connection.pulse import PulseConnection
    from volume_watcher.watcher import VolumeWatcher

    output = io.StringIO()
    watcher = VolumeWatcher(PulseConnection(client_name="pa-volume-watcher-test"), output=output)
    task = asyncio.create_task(watcher.run())

    for _ in range(50):
        if output.getvalue():
            break
        await asyncio.sleep(0.1)

    await watcher.shutdown()
    status = await asyncio.wait_for(task, timeout=5.0)

    lines = output.getvalue().splitlines()
    assert status == 0
    assert lines, "no volume line reported by the live server"
    assert all(LINE_PATTERN.match(line) for line in lines)
