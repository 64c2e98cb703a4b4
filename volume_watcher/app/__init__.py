"""Application entrypoints for the volume watcher."""

from .main import main, parse_args

__all__ = ["main", "parse_args"]
