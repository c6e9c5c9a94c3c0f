"""Centralized filesystem locations for the catalog payloads."""

from __future__ import annotations

import os
from pathlib import Path


_ENV_DATA_ROOT = "CATALOG_DATA_ROOT"
_ENV_MEDIA_DIR = "CATALOG_MEDIA_DIR"
_ENV_CATALOG_CSV = "CATALOG_CSV"
_ENV_MEDIA_INDEX = "CATALOG_MEDIA_INDEX"

_REPO_ROOT = Path(__file__).resolve().parents[2]


def _normalise_path(value: str | Path) -> Path:
    """Return an absolute ``Path`` while being forgiving with inputs."""

    candidate = Path(value).expanduser()
    try:
        return candidate.resolve()
    except RuntimeError:
        # ``resolve`` can raise on recursive symlinks; fall back to ``absolute``.
        return candidate.absolute()


def _path_from_env(var_name: str, default: Path) -> Path:
    """Load ``var_name`` from the environment, normalising it when available."""

    raw_value = os.environ.get(var_name)
    if raw_value is None:
        return default

    stripped = raw_value.strip()
    if not stripped:
        return default

    return _normalise_path(stripped)


# Shared data locations -----------------------------------------------------

DATA_ROOT = _path_from_env(_ENV_DATA_ROOT, _normalise_path(_REPO_ROOT / "data"))
"""Directory containing the catalog table and the media index."""

MEDIA_DIR = _path_from_env(_ENV_MEDIA_DIR, _normalise_path(_REPO_ROOT / "Media"))
"""Directory holding the image and video files referenced by the media index."""

CATALOG_CSV = _path_from_env(_ENV_CATALOG_CSV, DATA_ROOT / "BK.csv")
"""Delimited text with the ``ID,Name,Type,Affiliation,Desc,MediaKey`` columns."""

MEDIA_INDEX_JSON = _path_from_env(_ENV_MEDIA_INDEX, DATA_ROOT / "media-index.json")
"""JSON array of filenames, or object grouping filenames under keys."""


__all__ = ["DATA_ROOT", "MEDIA_DIR", "CATALOG_CSV", "MEDIA_INDEX_JSON"]
