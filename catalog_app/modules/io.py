"""Readers for the catalog table and the media index on disk.

The low-level readers raise :class:`MissingDatasetError` so callers can tell
a missing file apart from an empty one. :func:`load_catalog` is the entry
point used by the Streamlit page: it never raises for missing or unreadable
payloads and substitutes empty inputs instead, which the engine already
handles gracefully.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from . import paths
from .catalog import Catalog
from .filters import ActiveFilterState

LOGGER = logging.getLogger(__name__)


class MissingDatasetError(FileNotFoundError):
    """Raised when a required catalog payload is missing from disk."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Required catalog file not found: {self.path}")


INSTALL_DATA_HINT = (
    "Place the table and media index under the data directory or point "
    "CATALOG_CSV / CATALOG_MEDIA_INDEX at them."
)


def format_missing_dataset_message(error: MissingDatasetError) -> str:
    return f"{error} {INSTALL_DATA_HINT}"


@lru_cache(maxsize=4)
def _read_text_cached(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise MissingDatasetError(path) from exc


@lru_cache(maxsize=4)
def _read_json_cached(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise MissingDatasetError(path) from exc
    return json.loads(text)


def read_catalog_text(path: Path | str | None = None) -> str:
    """Return the raw catalog table text."""

    return _read_text_cached(Path(path) if path is not None else paths.CATALOG_CSV)


def read_media_index(path: Path | str | None = None) -> Any:
    """Return the decoded media index payload (shape not yet validated).

    Raises:
        MissingDatasetError: If the file does not exist.
        ValueError: If the file is not valid JSON.
    """

    return _read_json_cached(Path(path) if path is not None else paths.MEDIA_INDEX_JSON)


def invalidate_io_caches() -> None:
    _read_text_cached.cache_clear()
    _read_json_cached.cache_clear()


@dataclass
class LoadResult:
    catalog: Catalog
    errors: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def load_catalog(
    csv_path: Path | str | None = None,
    media_path: Path | str | None = None,
    *,
    filters: ActiveFilterState | None = None,
) -> LoadResult:
    """Read both payloads and build a :class:`Catalog`.

    Failures to read either payload are collected in ``LoadResult.errors``
    and the affected input is replaced by an empty one.
    """

    errors: list[str] = []

    try:
        raw_text = read_catalog_text(csv_path)
    except MissingDatasetError as exc:
        LOGGER.warning("Catalog table unavailable: %s", exc)
        errors.append(format_missing_dataset_message(exc))
        raw_text = ""
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.warning("Catalog table could not be read: %s", exc)
        errors.append(f"Catalog table could not be read: {exc}")
        raw_text = ""

    try:
        media_payload = read_media_index(media_path)
    except MissingDatasetError as exc:
        LOGGER.warning("Media index unavailable: %s", exc)
        errors.append(format_missing_dataset_message(exc))
        media_payload = None
    except (OSError, ValueError) as exc:
        LOGGER.warning("Media index could not be read: %s", exc)
        errors.append(f"Media index could not be read: {exc}")
        media_payload = None

    catalog = Catalog.from_payloads(raw_text, media_payload, filters=filters)
    LOGGER.info(
        "Loaded catalog with %d records and %d media files",
        len(catalog.records),
        len(catalog.filenames),
    )
    return LoadResult(catalog=catalog, errors=errors)


__all__ = [
    "MissingDatasetError",
    "INSTALL_DATA_HINT",
    "format_missing_dataset_message",
    "read_catalog_text",
    "read_media_index",
    "invalidate_io_caches",
    "LoadResult",
    "load_catalog",
]
