"""Command-line entry point: shows a fresh character sheet."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from techrot.player import Player


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a new player and print the full stats sheet."""
    parser = argparse.ArgumentParser(
        prog="techrot", description="Show the stats of a new character."
    )
    parser.parse_args(argv)
    Player().print_full_stats()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())