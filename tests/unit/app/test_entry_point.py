"""Tests for the process entry point, its signal wiring and exception hooks."""

from __future__ import annotations

import asyncio
import importlib
import logging
import os
import signal
import sys

import pytest

from tests.infrastructure.mocks.pulse_mocks import FakeConnection, FakeServer
from volume_watcher.cli.common import install_exception_handlers, install_signal_handlers
from volume_watcher.watcher.domain.entities import ConnectionState

# volume_watcher.app re-exports the main() function under the submodule's name
main_module = importlib.import_module("volume_watcher.app.main")


@pytest.fixture
def built_connections(monkeypatch):
    """Replace the PulseAudio connection factory with recording fakes."""
    created = []

    def factory(fail_connect: bool):
        def build(settings):
            connection = FakeConnection(FakeServer(), fail_connect=fail_connect)
            connection.settings = settings
            created.append(connection)
            return connection
        return build

    monkeypatch.setattr(main_module, "configure_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(main_module, "install_exception_handlers", lambda *args, **kwargs: None)
    monkeypatch.setattr(main_module, "install_signal_handlers", lambda *args, **kwargs: None)
    return created, factory


class TestMain:

    @pytest.mark.asyncio
    async def test_connect_failure_exits_with_failure(self, built_connections, monkeypatch):
        created, factory = built_connections
        monkeypatch.setattr(main_module, "build_connection", factory(fail_connect=True))

        status = await main_module.main(["--server", "unix:/tmp/none", "--client-name", "watcher-test"])

        assert status == 1
        assert created[0].settings.client_name == "watcher-test"
        assert created[0].settings.server == "unix:/tmp/none"
        assert created[0].closed is True

    @pytest.mark.asyncio
    async def test_connection_failure_after_connect_exits_with_failure(self, built_connections, monkeypatch):
        created, factory = built_connections
        monkeypatch.setattr(main_module, "build_connection", factory(fail_connect=False))

        task = asyncio.create_task(main_module.main([]))
        while not created or not created[0].states:
            await asyncio.sleep(0)
        created[0].emit_state(ConnectionState.FAILED)

        assert await asyncio.wait_for(task, timeout=1.0) == 1

    def test_parse_args_defaults(self):
        args = main_module.parse_args([])

        assert args.log_level == "warning"
        assert args.server is None
        assert args.client_name == "pa-volume-watcher"


class _Supervisor:
    def __init__(self) -> None:
        self.shutdowns = 0

    async def shutdown(self) -> None:
        self.shutdowns += 1


class TestSignalHandlers:

    @pytest.mark.asyncio
    async def test_sigterm_requests_shutdown(self):
        loop = asyncio.get_running_loop()
        supervisor = _Supervisor()
        install_signal_handlers(supervisor, loop)
        try:
            os.kill(os.getpid(), signal.SIGTERM)
            for _ in range(100):
                if supervisor.shutdowns:
                    break
                await asyncio.sleep(0.01)
        finally:
            for sig in (signal.SIGINT, signal.SIGTERM):
                loop.remove_signal_handler(sig)

        assert supervisor.shutdowns == 1


class TestExceptionHandlers:

    @pytest.fixture
    def hooked_loop(self):
        loop = asyncio.new_event_loop()
        previous_hook = sys.excepthook
        yield loop
        sys.excepthook = previous_hook
        loop.close()

    def test_loop_exception_is_logged_with_lazy_arguments(self, hooked_loop, caplog):
        logger = logging.getLogger("volume_watcher.tests.hooks")
        install_exception_handlers(logger, hooked_loop)
        error = RuntimeError("callback blew up")

        with caplog.at_level(logging.ERROR, logger="volume_watcher.tests.hooks"):
            hooked_loop.call_exception_handler({"message": "Task exception", "exception": error})

        (record,) = caplog.records
        assert record.msg == "Asyncio exception: %s"
        assert record.args == ("Task exception",)
        assert record.exc_info[1] is error

    def test_loop_error_without_exception_keeps_context(self, hooked_loop, caplog):
        logger = logging.getLogger("volume_watcher.tests.hooks")
        install_exception_handlers(logger, hooked_loop)

        with caplog.at_level(logging.ERROR, logger="volume_watcher.tests.hooks"):
            hooked_loop.call_exception_handler({"message": "Unclosed transport"})

        (record,) = caplog.records
        assert record.msg == "Asyncio error: %s, context: %s"
        assert record.getMessage().startswith("Asyncio error: Unclosed transport, context: {")
