"""Unit tests for the startup options of the watcher."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from volume_watcher.watcher.config.settings import (
    WatcherSettings,
    build_arg_parser,
    parse_cli_args,
    resolve_log_level,
)
from volume_watcher.watcher.domain.constants import DEFAULT_CLIENT_NAME


class TestDefaults:

    def test_no_arguments_gives_defaults(self):
        settings = WatcherSettings.from_args(parse_cli_args([]))

        assert settings == WatcherSettings()
        assert settings.log_level == "warning"
        assert settings.log_file is None
        assert settings.console_output is True
        assert settings.server is None
        assert settings.client_name == DEFAULT_CLIENT_NAME


class TestFromArgs:

    def test_all_options(self, tmp_path):
        log_file = tmp_path / "watcher.log"
        args = parse_cli_args([
            "--log-level", "debug",
            "--log-file", str(log_file),
            "--no-console",
            "--server", "unix:/run/user/1000/pulse/native",
            "--client-name", "statusbar",
        ])
        settings = WatcherSettings.from_args(args)

        assert settings.log_level == "debug"
        assert settings.log_file == log_file
        assert settings.console_output is False
        assert settings.server == "unix:/run/user/1000/pulse/native"
        assert settings.client_name == "statusbar"

    def test_string_log_file_is_normalized_to_path(self):
        settings = WatcherSettings.from_args(SimpleNamespace(log_file="logs/watcher.log"))

        assert settings.log_file == Path("logs/watcher.log")

    def test_empty_server_means_default(self):
        settings = WatcherSettings.from_args(SimpleNamespace(server=""))

        assert settings.server is None

    def test_unknown_log_level_falls_back(self):
        settings = WatcherSettings.from_args(SimpleNamespace(log_level="chatty"))

        assert settings.log_level == "warning"


class TestResolveLogLevel:

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("warn", "warning"),
            ("ERR", "error"),
            ("fatal", "critical"),
            (" Info ", "info"),
        ],
    )
    def test_aliases_and_case(self, value, expected):
        assert resolve_log_level(value, "warning") == (expected, False)

    def test_blank_is_default_without_complaint(self):
        assert resolve_log_level("", "warning") == ("warning", False)
        assert resolve_log_level(None, "info") == ("info", False)

    def test_unknown_is_rejected(self):
        assert resolve_log_level("verbose", "warning") == ("warning", True)


def test_console_flags_are_mutually_exclusive():
    parser = build_arg_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--console", "--no-console"])
