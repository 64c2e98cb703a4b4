from .settings import WatcherSettings, build_arg_parser, parse_cli_args, resolve_log_level

__all__ = ["WatcherSettings", "build_arg_parser", "parse_cli_args", "resolve_log_level"]
