"""Command-line entry point for the dining-philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.parsing import ArgumentError, parse_arguments
from philosophers.simulation import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments; -1 on bad arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_arguments(args)
    except ArgumentError:
        print("Error")
        return -1
    try:
        Table(settings).run()
    except RuntimeError:
        print("Error occured while creating or joining threads")
    return 0


if __name__ == "__main__":
    sys.exit(main())