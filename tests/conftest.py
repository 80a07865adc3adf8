"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Forces the non-interactive matplotlib backend.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides small district CSV fixtures.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from absence_lookup.pipeline.district_data import DistrictRecord  # noqa: E402

HEADER = "clean_name,20192020,20202021,20212022,20222023,20232024,20242025"

SAMPLE_CSV = "\n".join(
    [
        HEADER,
        "Aspen Ridge Unified,10.5,NA,,8.25,NA,9.0",
        "Birch Hollow Public Schools,18.2,24.6,41.3,37.9,34.1,31.7",
        "Cedar Falls Union,8.9,12.4,22.8,19.6,17.3,16.0",
        "North Cedar Academy,NA,NA,NA,NA,NA,NA",
    ]
) + "\n"


@pytest.fixture
def sample_csv_text() -> str:
    return SAMPLE_CSV


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    path = tmp_path / "district_data.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def reference_record() -> DistrictRecord:
    return DistrictRecord.from_row(
        {
            "clean_name": "Aspen Ridge Unified",
            "20192020": "10.5",
            "20202021": "NA",
            "20212022": "",
            "20222023": "8.25",
            "20232024": "NA",
            "20242025": "9.0",
        }
    )


class RecordingTableRenderer:
    """Table renderer that remembers every call."""

    def __init__(self):
        self.calls = []

    def render(self, title, rows):
        self.calls.append((title, list(rows)))


@pytest.fixture
def table_renderer() -> RecordingTableRenderer:
    return RecordingTableRenderer()
