"""Shared schema constants and helpers for catalog records."""

from __future__ import annotations

from collections.abc import Mapping


RECORD_FIELDS: tuple[str, ...] = (
    "ID",
    "Name",
    "Type",
    "Affiliation",
    "Desc",
    "MediaKey",
)

FACET_FIELDS: tuple[str, ...] = (
    "Type",
    "Affiliation",
)

FACET_LABELS: dict[str, str] = {
    "Type": "Type",
    "Affiliation": "Affiliation",
}

VIDEO_EXTENSIONS: frozenset[str] = frozenset({"mp4", "webm", "ogg"})

# Deployments ship the table with slightly different header names; they are
# folded onto the canonical field set before records reach the engine.
HEADER_ALIASES: dict[str, str] = {
    "id": "ID",
    "name": "Name",
    "type": "Type",
    "affiliation": "Affiliation",
    "affiliations": "Affiliation",
    "desc": "Desc",
    "description": "Desc",
    "mediakey": "MediaKey",
    "media_key": "MediaKey",
    "imgid": "MediaKey",
    "img_id": "MediaKey",
}


def canonical_field_name(header: str) -> str:
    """Return the canonical field for ``header`` or the trimmed header itself."""

    cleaned = header.strip()
    return HEADER_ALIASES.get(cleaned.lower(), cleaned)


def to_canonical_record(row: Mapping[str, str]) -> dict[str, str]:
    """Project ``row`` onto :data:`RECORD_FIELDS`.

    Headers are resolved through :data:`HEADER_ALIASES`; when two headers map
    onto the same field the first one wins. Fields absent from ``row`` are
    filled with an empty string so every record exposes the full shape.
    """

    record = {field: "" for field in RECORD_FIELDS}
    seen: set[str] = set()
    for header, value in row.items():
        field = canonical_field_name(header)
        if field not in record or field in seen:
            continue
        seen.add(field)
        record[field] = "" if value is None else str(value)
    return record


__all__ = [
    "RECORD_FIELDS",
    "FACET_FIELDS",
    "FACET_LABELS",
    "VIDEO_EXTENSIONS",
    "HEADER_ALIASES",
    "canonical_field_name",
    "to_canonical_record",
]
