"""Helper utilities for building data tables shown in the catalog page.

These helpers turn record and media sequences into ``pandas`` objects so the
Streamlit view can rely on simple, well-tested dataframes. They avoid any
Streamlit imports in order to remain easy to unit test.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Sequence

import pandas as pd

from .media_resolver import MediaItem

RECORD_TABLE_COLUMNS: tuple[str, ...] = ("ID", "Name", "Type", "Affiliation")
MEDIA_TABLE_COLUMNS: tuple[str, ...] = ("File", "Kind")


def build_record_table(
    records: Iterable[Mapping[str, str]],
    columns: Sequence[str] = RECORD_TABLE_COLUMNS,
) -> pd.DataFrame:
    """Return a dataframe with one row per record, in record order."""

    rows = [{column: record.get(column, "") for column in columns} for record in records]
    frame = pd.DataFrame(rows, columns=list(columns))
    return frame.astype(str) if not frame.empty else frame


def build_media_table(items: Iterable[MediaItem]) -> pd.DataFrame:
    """Return a dataframe listing resolved media files and their kind."""

    rows = [{"File": item.filename, "Kind": item.kind} for item in items]
    return pd.DataFrame(rows, columns=list(MEDIA_TABLE_COLUMNS))


def summarise_visible(total: int, visible: int) -> str:
    """Return the caption shown above the gallery."""

    if visible == total:
        return f"{total} records"
    return f"{visible} of {total} records"


__all__ = [
    "RECORD_TABLE_COLUMNS",
    "MEDIA_TABLE_COLUMNS",
    "build_record_table",
    "build_media_table",
    "summarise_visible",
]
