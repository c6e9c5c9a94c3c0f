"""Tests for prefix-based media resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from catalog_app.modules.media_resolver import (
    MediaItem,
    classify_media,
    media_extension,
    media_source,
    resolve_media,
)


def test_resolve_media_matches_prefix_in_first_seen_order() -> None:
    filenames = ("ab1-front.png", "ab1-back.mp4", "xy9.png")

    assert resolve_media("ab1", filenames) == (
        MediaItem("ab1-front.png", "image"),
        MediaItem("ab1-back.mp4", "video"),
    )


@pytest.mark.parametrize("key", ["", None])
def test_blank_key_matches_nothing(key) -> None:
    assert resolve_media(key, ("a.png", "b.png")) == ()


def test_matching_is_case_insensitive() -> None:
    (item,) = resolve_media("AB1", ("ab1-front.PNG",))

    assert item.filename == "ab1-front.PNG"
    assert item.kind == "image"


def test_prefix_collisions_are_preserved() -> None:
    matches = resolve_media("ab1", ("ab1.png", "ab12-extra.png", "xab1.png"))

    assert [item.filename for item in matches] == ["ab1.png", "ab12-extra.png"]


def test_no_match_is_an_empty_result() -> None:
    assert resolve_media("zz", ("ab1.png",)) == ()


@pytest.mark.parametrize(
    ("filename", "kind"),
    [
        ("clip.mp4", "video"),
        ("clip.WEBM", "video"),
        ("clip.ogg", "video"),
        ("photo.jpg", "image"),
        ("archive.tar.mp4", "video"),
        ("mp4", "image"),
        ("trailing.", "image"),
    ],
)
def test_classify_media_by_extension(filename: str, kind: str) -> None:
    assert classify_media(filename) == kind


def test_media_extension_is_lower_cased() -> None:
    assert media_extension("A.B.PnG") == "png"
    assert media_extension("noext") == ""


def test_media_source_returns_existing_files_only(tmp_path: Path) -> None:
    (tmp_path / "a.png").write_bytes(b"")

    assert media_source("a.png", tmp_path) == tmp_path / "a.png"
    assert media_source("missing.png", tmp_path) is None
    assert media_source("../outside.png", tmp_path) is None
