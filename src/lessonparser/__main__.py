"""Allow `python -m lessonparser FILE LESSON`."""

from __future__ import annotations

import sys

from .main import run


def main() -> None:
    """Run the CLI on the process arguments and exit with its status."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":  # pragma: no cover
    main()
