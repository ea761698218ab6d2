"""Sidebar layer control: base map choice and overlay toggles."""

from typing import Dict, List, Mapping, Optional

import streamlit as st

from config.settings import settings


def init_sidebar_state() -> None:
  """Initialize sidebar state with defaults."""
  defaults = {
      "base_map": settings.map.default_base,
      "visible_overlays": [
          name for name, visible in settings.map.overlays.items() if visible
      ],
  }

  for key, value in defaults.items():
    if key not in st.session_state:
      st.session_state[key] = value


def render_layer_control(
    feature_counts: Optional[Mapping[str, int]] = None,
) -> Dict:
  """
  Render the expanded layer control in the sidebar.

  Args:
      feature_counts: Overlay name -> rendered item count, shown as captions

  Returns:
      Dictionary with "base_map" and "visible_overlays"
  """
  init_sidebar_state()
  feature_counts = feature_counts or {}
  base_names = [base.name for base in settings.map.base_maps]

  with st.sidebar:
    st.markdown("### Earthquake Map")

    st.markdown("##### Base Map")
    current = st.session_state.base_map
    base_map = st.radio(
        "Base Map",
        options=base_names,
        index=base_names.index(current) if current in base_names else 0,
        key="base_map_radio",
        label_visibility="collapsed",
    )
    st.session_state.base_map = base_map

    selected = next(base for base in settings.map.base_maps if base.name == base_map)
    if selected.requires_key and not settings.map.mapbox_api_key:
      st.info("Set MAPBOX_API_KEY to load this base map's tiles.")
    st.caption(selected.attribution, unsafe_allow_html=True)

    st.markdown("##### Overlays")
    visible_overlays: List[str] = []
    for name in settings.map.overlays:
      checked = st.checkbox(
          name,
          value=name in st.session_state.visible_overlays,
          key=f"overlay_{name.lower().replace(' ', '_')}",
      )
      if checked:
        visible_overlays.append(name)
      if name in feature_counts:
        st.caption(f"{feature_counts[name]:,} features loaded")
    st.session_state.visible_overlays = visible_overlays

  return {
      "base_map": base_map,
      "visible_overlays": visible_overlays,
  }
