"""Minimal runner for the district lookup.

Delegates to ``absence_lookup.cli.main``.

Usage:
    python run_lookup.py [--csv SOURCE] search QUERY
    python run_lookup.py tui

"""

from __future__ import annotations


def entry_point(argv: list[str] | None = None) -> int:
    """Run the lookup CLI and return its exit code.

    The CLI is imported lazily.
    """
    from absence_lookup.cli import main

    return main(argv)


if __name__ == "__main__":
    raise SystemExit(entry_point())
