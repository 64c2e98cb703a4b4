"""Shared pytest configuration and fixtures for the volume watcher test suite."""

import io
import sys
from pathlib import Path

import pytest

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "pulse: mark test as requiring libpulse (adapter tests) or a running PulseAudio/PipeWire server (live tests)"
    )
    config.addinivalue_line(
        "markers", "asyncio: mark test as async"
    )


def pytest_addoption(parser):
    """Add custom command-line options."""
    parser.addoption(
        "--run-pulse",
        action="store_true",
        default=False,
        help="Run tests that load libpulse or talk to a live audio server",
    )


def pytest_collection_modifyitems(config, items):
    """Skip libpulse and live-server tests unless --run-pulse is specified."""
    if config.getoption("--run-pulse"):
        return

    skip_pulse = pytest.mark.skip(reason="Need --run-pulse option to run")
    for item in items:
        if "pulse" in item.keywords:
            item.add_marker(skip_pulse)


# =============================================================================
# Shared Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def fake_server():
    """A fake audio server with no devices and no default."""
    from tests.infrastructure.mocks.pulse_mocks import FakeServer
    return FakeServer()


@pytest.fixture
def fake_connection(fake_server):
    """A scripted connection answering from ``fake_server``."""
    from tests.infrastructure.mocks.pulse_mocks import FakeConnection
    return FakeConnection(fake_server)


@pytest.fixture
def output() -> io.StringIO:
    """Captures the watcher's stdout lines."""
    return io.StringIO()
