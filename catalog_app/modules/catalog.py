"""Control surface shared by the Streamlit view and the tests.

:class:`Catalog` bundles the immutable snapshots built from one load (the
record tuple and the normalised media filenames) with the filter state owned
by the UI. Every query is recomputed from those three pieces, so repeated
calls are idempotent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .facets import facet_counts, index_facet
from .filters import ActiveFilterState, compute_visible
from .media_index import normalize_media_index
from .media_resolver import MediaItem, resolve_media
from .tabular_parser import parse_catalog

LOGGER = logging.getLogger(__name__)

EMPTY_CATALOG_MESSAGE = "No catalog records could be loaded."
NO_MATCH_MESSAGE = "No records match the selected filters."


@dataclass
class Catalog:
    records: tuple[Mapping[str, str], ...]
    filenames: tuple[str, ...] = ()
    filters: ActiveFilterState = field(default_factory=ActiveFilterState.for_facets)

    def __post_init__(self) -> None:
        if self.records is None:
            raise TypeError("Catalog requires a record sequence, got None")
        self.records = tuple(self.records)
        self.filenames = tuple(self.filenames or ())
        # First occurrence wins when the source repeats an ID; blank IDs are
        # not addressable.
        self._by_id: dict[str, Mapping[str, str]] = {}
        for record in self.records:
            record_id = record.get("ID", "")
            if record_id:
                self._by_id.setdefault(record_id, record)
        identified = sum(1 for record in self.records if record.get("ID", ""))
        duplicates = identified - len(self._by_id)
        if duplicates:
            LOGGER.warning("Catalog contains %d records with a repeated ID", duplicates)

    @classmethod
    def from_payloads(
        cls,
        raw_text: str,
        media_payload: Any = None,
        *,
        filters: ActiveFilterState | None = None,
    ) -> "Catalog":
        """Build a catalog from the raw table text and the media index payload."""

        return cls(
            records=parse_catalog(raw_text),
            filenames=normalize_media_index(media_payload),
            filters=filters if filters is not None else ActiveFilterState.for_facets(),
        )

    @property
    def is_empty(self) -> bool:
        """``True`` when the load produced no records at all."""

        return not self.records

    # Filter mutators -------------------------------------------------------

    def activate(self, facet: str, value: str) -> None:
        self.filters.activate(facet, value)

    def deactivate(self, facet: str, value: str) -> None:
        self.filters.deactivate(facet, value)

    def clear_facet(self, facet: str) -> None:
        self.filters.clear(facet)

    # Queries ---------------------------------------------------------------

    def get_visible_records(self) -> tuple[Mapping[str, str], ...]:
        return compute_visible(self.records, self.filters)

    def get_facet_values(self, facet: str) -> tuple[str, ...]:
        return index_facet(self.records, facet)

    def get_facet_counts(self, facet: str) -> dict[str, int]:
        return facet_counts(self.records, facet)

    def get_record_by_id(self, record_id: str) -> Mapping[str, str] | None:
        return self._by_id.get(record_id)

    def resolve_media_for_record(self, record_id: str) -> tuple[MediaItem, ...]:
        record = self.get_record_by_id(record_id)
        if record is None:
            return ()
        return resolve_media(record.get("MediaKey", ""), self.filenames)

    def status_message(self, visible: Sequence[Mapping[str, str]] | None = None) -> str | None:
        """Explain an empty view, or return ``None`` when there is something to show.

        A catalog that never loaded any record reports a load failure; a
        catalog whose filters exclude everything reports "no match".
        """

        if self.is_empty:
            return EMPTY_CATALOG_MESSAGE
        if visible is None:
            visible = self.get_visible_records()
        if not visible:
            return NO_MATCH_MESSAGE
        return None


__all__ = [
    "Catalog",
    "EMPTY_CATALOG_MESSAGE",
    "NO_MATCH_MESSAGE",
]
