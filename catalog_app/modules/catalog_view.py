"""Streamlit rendering for the catalog: facet sidebar, gallery and detail panel.

The view owns the :class:`ActiveFilterState` (kept in ``st.session_state``)
and mutates it only from widget callbacks. Everything else is delegated to
:class:`~catalog_app.modules.catalog.Catalog`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Sequence

import streamlit as st

from . import paths
from .catalog import Catalog
from .filters import ActiveFilterState
from .io import LoadResult
from .media_resolver import MediaItem, media_source
from .page_data import build_media_table, build_record_table, summarise_visible
from .schema import FACET_FIELDS, FACET_LABELS

FILTER_STATE_KEY = "catalog_filters"
SELECTED_RECORD_KEY = "catalog_selected_id"
GALLERY_COLUMNS = 3


def checkbox_key(facet: str, value: str) -> str:
    return f"facet_{facet}_{value}"


def reset_key(facet: str) -> str:
    return f"reset_{facet}"


def get_filter_state() -> ActiveFilterState:
    """Return the session filter state, creating it on first use."""

    state = st.session_state.get(FILTER_STATE_KEY)
    if not isinstance(state, ActiveFilterState):
        state = ActiveFilterState.for_facets()
        st.session_state[FILTER_STATE_KEY] = state
    return state


def _on_checkbox_change(facet: str, value: str) -> None:
    state = get_filter_state()
    if st.session_state.get(checkbox_key(facet, value)):
        state.activate(facet, value)
    else:
        state.deactivate(facet, value)


def _on_reset(facet: str, values: Sequence[str]) -> None:
    get_filter_state().clear(facet)
    # The checkboxes carry their own widget state and must be unticked too.
    for value in values:
        st.session_state[checkbox_key(facet, value)] = False


def _open_detail(record_id: str) -> None:
    st.session_state[SELECTED_RECORD_KEY] = record_id


def _close_detail() -> None:
    st.session_state.pop(SELECTED_RECORD_KEY, None)


def render_facet_filters(catalog: Catalog, facets: Sequence[str] = FACET_FIELDS) -> None:
    """Render one checkbox group with a reset button per facet in the sidebar."""

    state = catalog.filters
    with st.sidebar:
        st.header("Filters")
        for facet in facets:
            counts = catalog.get_facet_counts(facet)
            st.subheader(FACET_LABELS.get(facet, facet))
            if not counts:
                st.caption("No values")
                continue
            active = state.active_values(facet)
            for value, count in counts.items():
                key = checkbox_key(facet, value)
                if key not in st.session_state:
                    st.session_state[key] = value in active
                st.checkbox(
                    f"{value} ({count})",
                    key=key,
                    on_change=_on_checkbox_change,
                    args=(facet, value),
                )
            st.button(
                "Reset",
                key=reset_key(facet),
                on_click=_on_reset,
                args=(facet, tuple(counts)),
            )


def render_gallery(records: Sequence[Mapping[str, str]]) -> None:
    """Render the visible records as a grid of cards."""

    columns = st.columns(GALLERY_COLUMNS)
    for index, record in enumerate(records):
        with columns[index % GALLERY_COLUMNS]:
            st.markdown(f"#### {record.get('Name', '')}")
            st.caption(record.get("Type", ""))
            record_id = record.get("ID", "")
            st.button(
                "Details",
                key=f"open_{index}_{record_id}",
                on_click=_open_detail,
                args=(record_id,),
                disabled=not record_id,
            )


def render_media(items: Sequence[MediaItem], media_dir: Path | str) -> None:
    if not items:
        st.caption("No media for this record.")
        return
    for item in items:
        source = media_source(item.filename, media_dir)
        if source is None:
            st.caption(f"Missing media file: {item.filename}")
        elif item.is_video:
            st.video(str(source))
        else:
            st.image(str(source), caption=item.filename)


def render_detail(catalog: Catalog, media_dir: Path | str) -> None:
    """Render the detail panel for the selected record, if any."""

    record_id = st.session_state.get(SELECTED_RECORD_KEY)
    if record_id is None:
        return
    record = catalog.get_record_by_id(record_id)
    if record is None:
        _close_detail()
        return

    st.divider()
    st.subheader(record.get("Name", ""))
    st.markdown(f"**Type:** {record.get('Type', '')}")
    st.markdown(f"**Affiliation:** {record.get('Affiliation', '')}")
    st.write(record.get("Desc", ""))
    items = catalog.resolve_media_for_record(record_id)
    render_media(items, media_dir)
    if items:
        with st.expander("Media files"):
            st.dataframe(build_media_table(items), hide_index=True)
    st.button("Close", key="close_detail", on_click=_close_detail)


def render_catalog_page(result: LoadResult, *, media_dir: Path | str | None = None) -> None:
    """Render the whole catalog page for a finished load."""

    catalog = result.catalog
    # Widget callbacks mutate the session state; queries must read the same object.
    catalog.filters = get_filter_state()
    media_dir = media_dir if media_dir is not None else paths.MEDIA_DIR

    st.title("Catalog")
    for error in result.errors:
        st.warning(error)

    render_facet_filters(catalog)

    visible = catalog.get_visible_records()
    message = catalog.status_message(visible)
    if catalog.is_empty:
        st.error(message)
        return

    st.caption(summarise_visible(len(catalog.records), len(visible)))
    if message:
        st.info(message)
    else:
        render_gallery(visible)
        with st.expander("Table view"):
            st.dataframe(build_record_table(visible), hide_index=True)

    render_detail(catalog, media_dir)


__all__ = [
    "FILTER_STATE_KEY",
    "SELECTED_RECORD_KEY",
    "checkbox_key",
    "reset_key",
    "get_filter_state",
    "render_facet_filters",
    "render_gallery",
    "render_media",
    "render_detail",
    "render_catalog_page",
]
