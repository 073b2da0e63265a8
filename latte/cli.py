"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

__all__ = ["main"]


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting and return the exit status."""
    parser = argparse.ArgumentParser(prog="latte", description="Latte chain node.")
    parser.parse_args(argv)
    print("Hello, world!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())