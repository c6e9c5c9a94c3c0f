"""Streamlit entrypoint rendering the filterable catalog."""

from pathlib import Path
import sys

# ``streamlit run catalog_app/Home.py`` only puts ``catalog_app/`` on the path.
if __package__ in {None, ""}:
    project_root_str = str(Path(__file__).resolve().parents[1])
    if project_root_str not in sys.path:
        sys.path.insert(0, project_root_str)

import streamlit as st

from catalog_app.modules import catalog_view
from catalog_app.modules.io import load_catalog


def render_page() -> None:
    """Load the catalog payloads and render the gallery page."""

    st.set_page_config(page_title="Catalog", layout="wide")
    result = load_catalog(filters=catalog_view.get_filter_state())
    catalog_view.render_catalog_page(result)


if __name__ == "__main__":  # pragma: no cover - Streamlit entrypoint
    render_page()
