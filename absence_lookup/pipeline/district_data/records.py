"""Immutable district record type."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from absence_lookup.config import NAME_COLUMN


@dataclass(frozen=True)
class DistrictRecord(Mapping[str, str]):
    r"""One row of the dataset: column name to string value.

    ``clean_name`` is the canonical display and search key. Every other column
    of the source row is kept read-only in ``fields``.

    Examples
    --------
    >>> rec = DistrictRecord.from_row({"clean_name": "Aspen Ridge Unified", "20192020": "10.5"})
    >>> rec["20192020"]
    '10.5'
    >>> rec.get("20202021") is None
    True
    """

    clean_name: str
    fields: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_row(cls, row: Mapping[str, str]) -> DistrictRecord:
        values = {str(k): "" if v is None else str(v) for k, v in row.items()}
        name = values.get(NAME_COLUMN, "").strip()
        values[NAME_COLUMN] = name
        return cls(clean_name=name, fields=MappingProxyType(values))

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __hash__(self) -> int:
        return hash((self.clean_name, tuple(self.fields.items())))
