"""Lightweight exports for the catalog viewer.

The Streamlit view (``catalog_view``) is imported lazily so the parsing and
filtering modules can be used without pulling the UI stack.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

from .catalog import Catalog
from .facets import index_facet
from .filters import ActiveFilterState, compute_visible
from .io import LoadResult, load_catalog
from .media_index import normalize_media_index
from .media_resolver import MediaItem, resolve_media
from .tabular_parser import parse_catalog, parse_table

__all__ = [
    "ActiveFilterState",
    "Catalog",
    "LoadResult",
    "MediaItem",
    "compute_visible",
    "index_facet",
    "load_catalog",
    "normalize_media_index",
    "parse_catalog",
    "parse_table",
    "resolve_media",
    "render_catalog_page",
]

_LAZY_MODULES = {
    "catalog_view": {
        "render_catalog_page",
    },
}


def __getattr__(name: str) -> Any:
    for module_name, symbols in _LAZY_MODULES.items():
        if name in symbols:
            module = import_module(f".{module_name}", __name__)
            value = getattr(module, name)
            globals()[name] = value
            return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
