"""Normalisation of the media index payload into one flat filename sequence.

The index is published either as a JSON array of filenames or as an object
grouping filenames under arbitrary keys. Both shapes are validated with
:mod:`pydantic` into a tagged union (``kind`` is ``"flat"`` or ``"grouped"``)
and then collapsed into a deduplicated tuple that keeps first-seen order.
Any other shape is treated as "no media" and logged rather than raised.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

LOGGER = logging.getLogger(__name__)


class FlatMediaIndex(BaseModel):
    """Media index published as a plain sequence of filenames."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["flat"] = "flat"
    filenames: list[str]

    def iter_filenames(self) -> Iterator[str]:
        yield from self.filenames


class GroupedMediaIndex(BaseModel):
    """Media index published as ``{group: [filename, ...]}``; group keys are opaque."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["grouped"] = "grouped"
    groups: dict[Any, list[str]]

    def iter_filenames(self) -> Iterator[str]:
        for filenames in self.groups.values():
            yield from filenames


MediaIndexPayload = Annotated[
    Union[FlatMediaIndex, GroupedMediaIndex], Field(discriminator="kind")
]

_PAYLOAD_ADAPTER: TypeAdapter[FlatMediaIndex | GroupedMediaIndex] = TypeAdapter(
    MediaIndexPayload
)


def _format_validation_errors(error: ValidationError) -> str:
    messages: list[str] = []
    for issue in error.errors():
        location = ".".join(str(part) for part in issue.get("loc", ("?",)))
        messages.append(f"{location}: {issue.get('msg', 'invalid value')}")
    return "; ".join(messages)


def classify_payload(raw: Any) -> FlatMediaIndex | GroupedMediaIndex | None:
    """Tag ``raw`` as a flat or grouped media index.

    Returns ``None`` for anything else (``None``, scalars, strings, groups
    that do not hold filename lists).
    """

    if isinstance(raw, Mapping):
        candidate: dict[str, Any] = {"kind": "grouped", "groups": dict(raw)}
    elif isinstance(raw, (list, tuple)):
        candidate = {"kind": "flat", "filenames": list(raw)}
    else:
        LOGGER.warning(
            "Media index payload of type %s is neither an array nor an object; "
            "treating it as empty",
            type(raw).__name__,
        )
        return None

    try:
        return _PAYLOAD_ADAPTER.validate_python(candidate)
    except ValidationError as error:
        LOGGER.warning(
            "Media index payload has an unexpected shape (%s); treating it as empty",
            _format_validation_errors(error),
        )
        return None


def normalize_media_index(raw: Any) -> tuple[str, ...]:
    """Return the unique filenames of ``raw`` in first-seen order."""

    payload = classify_payload(raw)
    if payload is None:
        return ()
    return tuple(dict.fromkeys(payload.iter_filenames()))


def load_media_index_json(text: str | bytes) -> tuple[str, ...]:
    """Decode a JSON media index and normalise it."""

    try:
        raw = json.loads(text)
    except (TypeError, ValueError) as exc:
        LOGGER.warning("Media index is not valid JSON (%s); treating it as empty", exc)
        return ()
    return normalize_media_index(raw)


__all__ = [
    "FlatMediaIndex",
    "GroupedMediaIndex",
    "MediaIndexPayload",
    "classify_payload",
    "normalize_media_index",
    "load_media_index_json",
]
