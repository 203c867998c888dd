"""Shared level records for the test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

DATA_DIR = Path(__file__).resolve().parent.parent.parent / "data"


def record(*rows: str) -> str:
    """Join eight 8-glyph rows into one 64-glyph record."""
    assert len(rows) == 8 and all(len(r) == 8 for r in rows), rows
    return "".join(rows)


# The first level of the original level set.
SCENARIO = record(
    "&&&&&&&&",
    "&---**|&",
    "&**|**|&",
    "&==|**|^",
    "&|*|*--&",
    "&|***|*&",
    "&---*|*&",
    "&&&&&&&&",
)

# Player with a clear run to the exit; a vertical piece (id 2) and a
# horizontal piece (id 3) in the bottom rows.
OPEN = record(
    "&&&&&&&&",
    "&******&",
    "&******&",
    "&==****^",
    "&******&",
    "&***|**&",
    "&***|--&",
    "&&&&&&&&",
)


@pytest.fixture()
def data_dir() -> Path:
    return DATA_DIR
