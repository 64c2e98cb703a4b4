"""Watch the default audio output device and print volume/mute changes."""

from __future__ import annotations

import asyncio
from importlib import metadata
from typing import Optional, Sequence

try:
    __version__ = metadata.version("pa-volume-watcher")
except metadata.PackageNotFoundError:  # pragma: no cover - local dev
    __version__ = "0.0.0"


def run(argv: Optional[Sequence[str]] = None) -> int:
    """Convenience wrapper that runs the async entry point and returns its status."""
    # Imported here so that importing the package does not build the CLI stack.
    from .app.main import main

    return asyncio.run(main(list(argv) if argv is not None else None))


__all__ = ["__version__", "run"]
