"""Fixtures wiring the watcher components onto a FakeConnection."""

from __future__ import annotations

import pytest

from volume_watcher.watcher import VolumeWatcher


@pytest.fixture
def watcher(fake_connection, output) -> VolumeWatcher:
    """A fully wired watcher that has not been started.

    Component tests drive the callbacks directly; ``run()`` is only used by
    the end-to-end scenario tests.
    """
    return VolumeWatcher(fake_connection, output=output)


@pytest.fixture
def state(watcher):
    return watcher.state
