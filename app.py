"""
Earthquake Map
USGS earthquakes and tectonic plate boundaries on a PyDeck map
"""

import sys
from pathlib import Path

import streamlit as st

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config.logging_setup import setup_logging
from config.settings import settings
from components.sidebar import render_layer_control
from feeds.client import fetch_geojson_cached
from feeds.loader import load_layer_groups
from visualization.legend import LEGEND_CSS, build_legend, render_legend_html
from visualization.map_view import compose_map, render_map

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title="Earthquakes | Last 30 Days",
    page_icon="🌋",
    layout="wide",
    initial_sidebar_state="expanded",
)

setup_logging(settings.log_level)


def inject_custom_css():
    """Inject custom CSS for a full-page map with a floating legend."""
    st.markdown(
        """
        <style>
        #MainMenu, footer {visibility: hidden;}

        .block-container {
            padding: 0 !important;
            max-width: 100% !important;
        }

        [data-testid="stDeckGlJsonChart"] {
            position: fixed !important;
            top: 0 !important;
            left: 0 !important;
            right: 0 !important;
            bottom: 0 !important;
            width: 100vw !important;
            height: 100vh !important;
            z-index: 0 !important;
        }
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.markdown(LEGEND_CSS, unsafe_allow_html=True)


def get_legend_html() -> str:
    """Build the legend once per session."""
    if "legend_html" not in st.session_state:
        st.session_state.legend_html = render_legend_html(build_legend())
    return st.session_state.legend_html


def load_groups():
    """Fetch both feeds concurrently; a failed feed leaves its group empty."""
    with st.spinner("Loading earthquake and plate-boundary data..."):
        return load_layer_groups(settings.feeds, fetch=fetch_geojson_cached)


def main():
    """Main application entry point."""
    inject_custom_css()

    groups = load_groups()
    params = render_layer_control(
        feature_counts={name: len(group) for name, group in groups.items()},
    )

    deck = compose_map(
        base_name=params["base_map"],
        visible_overlays=params["visible_overlays"],
        groups=groups,
    )
    render_map(deck)

    st.markdown(get_legend_html(), unsafe_allow_html=True)


if __name__ == "__main__":
    main()
