"""Rate table rendering for the terminal using Rich."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.table import Table

from absence_lookup.pipeline.lookup.projection import TableRow


class TableRenderer(Protocol):
    def render(self, title: str, rows: Sequence[TableRow]) -> None: ...


def build_rate_table(title: str, rows: Sequence[TableRow]) -> Table:
    """Return a Rich ``Table`` with one row per present year, in given order."""
    table = Table(title=title, title_justify="left")
    table.add_column("Year", style="bold")
    table.add_column("Rate", justify="right")
    for row in rows:
        table.add_row(row.label, row.value)
    return table


class RichTableRenderer:
    """Print rate tables to a Rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def render(self, title: str, rows: Sequence[TableRow]) -> None:
        self.console.print(build_rate_table(title, rows))
