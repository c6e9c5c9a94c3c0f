"""Find and classify the media files that belong to a catalog record.

Filenames are matched by case-insensitive *prefix* against the record's
``MediaKey``. There is no delimiter after the key, so ``"ab1"`` also picks up
``"ab12-extra.png"``; the dataset's naming convention relies on this and it is
kept as is. A blank key matches nothing.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Literal

from .schema import VIDEO_EXTENSIONS

MediaKind = Literal["image", "video"]


@dataclass(frozen=True)
class MediaItem:
    filename: str
    kind: MediaKind

    @property
    def is_video(self) -> bool:
        return self.kind == "video"


def media_extension(filename: str) -> str:
    """Return the lower-cased text after the last dot, or ``""``."""

    _, dot, extension = filename.rpartition(".")
    return extension.lower() if dot else ""


def classify_media(filename: str) -> MediaKind:
    """Classify ``filename`` as ``"video"`` or ``"image"`` by extension."""

    return "video" if media_extension(filename) in VIDEO_EXTENSIONS else "image"


def resolve_media(media_key: str, filenames: Iterable[str]) -> tuple[MediaItem, ...]:
    """Return the classified files whose name starts with ``media_key``.

    Order follows ``filenames``. An empty result means the record has no
    media.
    """

    prefix = (media_key or "").casefold()
    if not prefix:
        return ()
    return tuple(
        MediaItem(filename, classify_media(filename))
        for filename in filenames
        if filename.casefold().startswith(prefix)
    )


def media_source(filename: str, media_dir: Path | str) -> Path | None:
    """Return the on-disk path of ``filename`` or ``None`` when it is missing."""

    base = Path(media_dir)
    candidate = base / filename
    try:
        candidate.resolve().relative_to(base.resolve())
    except ValueError:
        return None
    return candidate if candidate.is_file() else None


__all__ = [
    "MediaItem",
    "MediaKind",
    "media_extension",
    "classify_media",
    "resolve_media",
    "media_source",
]
