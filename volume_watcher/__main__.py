"""Allow ``python -m volume_watcher`` to start the watcher."""

from __future__ import annotations

import sys


def main() -> None:
    from volume_watcher import run
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
