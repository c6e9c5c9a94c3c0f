"""Test configuration helpers."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _reset_io_caches():
    """Ensure cached payload reads do not leak across tests."""

    from catalog_app.modules.io import invalidate_io_caches

    invalidate_io_caches()
    try:
        yield
    finally:
        invalidate_io_caches()


@pytest.fixture
def sample_records() -> tuple[dict[str, str], ...]:
    return (
        {"ID": "1", "Name": "Alpha", "Type": "T1", "Affiliation": "X", "Desc": "", "MediaKey": "a1"},
        {"ID": "2", "Name": "Beta", "Type": "T2", "Affiliation": "X", "Desc": "", "MediaKey": "b2"},
        {"ID": "3", "Name": "Gamma", "Type": "T1", "Affiliation": "Y", "Desc": "", "MediaKey": "c3"},
        {"ID": "4", "Name": "Delta", "Type": "", "Affiliation": "Y", "Desc": "", "MediaKey": ""},
    )
