"""Projection of a district record into chart- and table-ready series.

Maps the fixed, ordered list of school-year codes through ``parse_rate`` and
pairs each with its human-readable label. The projection is total: any
missing, ``"NA"``, empty or unparseable cell becomes an absent value instead
of an error.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from absence_lookup.config import MISSING_VALUE_TOKEN, YEAR_CODES, YEAR_LABELS


@dataclass(frozen=True)
class YearPoint:
    label: str
    value: float | None

    @property
    def present(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class YearSeries:
    r"""Chronological (oldest first) sequence of year points.

    Attributes
    ----------
    points : tuple[YearPoint, ...]
        One point per configured year code.
    """

    points: tuple[YearPoint, ...]

    @property
    def labels(self) -> list[str]:
        return [p.label for p in self.points]

    @property
    def values(self) -> list[float | None]:
        return [p.value for p in self.points]

    def present(self) -> list[YearPoint]:
        """Return only the points that carry a value, oldest first."""
        return [p for p in self.points if p.present]

    def is_empty(self) -> bool:
        return not self.present()

    def __iter__(self):
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)


@dataclass(frozen=True)
class TableRow:
    label: str
    value: str


def parse_rate(raw: str | None) -> float | None:
    r"""Parse one year cell into a rate.

    Parameters
    ----------
    raw : str | None
        Cell text, or ``None`` if the column is missing.

    Returns
    -------
    float | None
        The rate, or ``None`` for missing, empty, ``"NA"``, unparseable or
        non-finite values.

    Examples
    --------
    >>> parse_rate("10.5")
    10.5
    >>> parse_rate("NA") is None and parse_rate("") is None
    True
    >>> parse_rate("n/a?") is None
    True
    """
    if raw is None:
        return None
    text = str(raw).strip()
    if not text or text == MISSING_VALUE_TOKEN:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def project_district(record: Mapping[str, str]) -> YearSeries:
    """Project a district record onto the configured year codes."""
    return YearSeries(
        tuple(
            YearPoint(label, parse_rate(record.get(code)))
            for code, label in zip(YEAR_CODES, YEAR_LABELS)
        )
    )


def format_rate(value: float) -> str:
    """Format a rate for display, e.g. ``9.0`` -> ``'9.0%'``."""
    return f"{value}%"


def table_rows(series: YearSeries) -> list[TableRow]:
    r"""Return the present entries of ``series``, newest first.

    Examples
    --------
    >>> s = project_district({"20192020": "10.5", "20242025": "9.0"})
    >>> [(r.label, r.value) for r in table_rows(s)]
    [('2024-2025', '9.0%'), ('2019-2020', '10.5%')]
    """
    return [
        TableRow(point.label, format_rate(point.value))
        for point in reversed(series.points)
        if point.value is not None
    ]
