"""Main PyDeck map component: base maps, overlays and view state."""

import logging
from typing import Dict, Iterable, List, Mapping, Optional

import pydeck as pdk
import streamlit as st

from config.settings import BaseMap, settings
from .layers import LayerGroup

logger = logging.getLogger("quake_map.visualization.map_view")

# Keyless Terrarium elevation tiles, used to drape raw XYZ tile bases
TERRAIN_ELEVATION_URL = "https://s3.amazonaws.com/elevation-tiles-prod/terrarium/{z}/{x}/{y}.png"
TERRAIN_ELEVATION_DECODER = {
    "rScaler": 256,
    "gScaler": 1,
    "bScaler": 1 / 256,
    "offset": -32768,
}


def get_initial_view_state(
    center_lat: Optional[float] = None,
    center_lon: Optional[float] = None,
    zoom: Optional[int] = None,
    pitch: Optional[int] = None,
    bearing: Optional[int] = None,
) -> pdk.ViewState:
    """
    Create initial view state for the map.

    Args:
        center_lat: Latitude of map center
        center_lon: Longitude of map center
        zoom: Initial zoom level
        pitch: Tilt angle (0-60)
        bearing: Rotation angle

    Returns:
        PyDeck ViewState object
    """
    return pdk.ViewState(
        latitude=center_lat if center_lat is not None else settings.map.center_lat,
        longitude=center_lon if center_lon is not None else settings.map.center_lon,
        zoom=zoom if zoom is not None else settings.map.default_zoom,
        pitch=pitch if pitch is not None else settings.map.default_pitch,
        bearing=bearing if bearing is not None else settings.map.default_bearing,
        max_zoom=settings.map.max_zoom,
    )


def get_base_maps() -> Dict[str, BaseMap]:
    """Base maps keyed by display name, in settings order."""
    return {base.name: base for base in settings.map.base_maps}


def get_base_map(name: Optional[str]) -> BaseMap:
    """Look up a base map, falling back to the configured default."""
    base_maps = get_base_maps()
    if name in base_maps:
        return base_maps[name]
    if name is not None:
        logger.warning(f"Unknown base map {name!r}, using {settings.map.default_base!r}")
    return base_maps[settings.map.default_base]


def create_base_layers(base: BaseMap) -> List[pdk.Layer]:
    """Deck layers needed to draw a raw-tile base; Mapbox styles need none."""
    if base.tile_url is None:
        return []

    return [
        pdk.Layer(
            "TerrainLayer",
            id="base-tiles",
            elevation_decoder=TERRAIN_ELEVATION_DECODER,
            elevation_data=TERRAIN_ELEVATION_URL,
            texture=base.tile_url,
            max_zoom=base.max_zoom,
        )
    ]


def get_tooltip_config() -> Dict:
    """Popup shown when an earthquake marker is picked."""
    return {
        "html": "{popup}",
        "style": {
            "backgroundColor": "white",
            "color": "#222",
            "fontFamily": "system-ui, sans-serif",
            "fontSize": "12px",
            "maxWidth": "320px",
        },
    }


def compose_map(
    base_name: Optional[str],
    visible_overlays: Iterable[str],
    groups: Mapping[str, LayerGroup],
    api_key: Optional[str] = None,
    view_state: Optional[pdk.ViewState] = None,
) -> pdk.Deck:
    """
    Stack the chosen base and the visible overlay groups into a Deck.

    Args:
        base_name: Name of the base map to show
        visible_overlays: Names of overlay groups switched on
        groups: All overlay groups by name
        api_key: Mapbox token (defaults to settings)
        view_state: Custom view state (uses default if None)

    Returns:
        PyDeck Deck object
    """
    base = get_base_map(base_name)
    if api_key is None:
        api_key = settings.map.mapbox_api_key
    if view_state is None:
        view_state = get_initial_view_state()

    layers = create_base_layers(base)
    visible = set(visible_overlays)
    # Later groups draw on top
    for name, group in groups.items():
        if name in visible:
            layers.extend(group.layers)

    if base.map_style is not None:
        return pdk.Deck(
            layers=layers,
            initial_view_state=view_state,
            tooltip=get_tooltip_config(),
            map_provider="mapbox",
            map_style=base.map_style,
            api_keys={"mapbox": api_key} if api_key else {},
        )

    return pdk.Deck(
        layers=layers,
        initial_view_state=view_state,
        tooltip=get_tooltip_config(),
        map_provider=None,
        map_style=None,
    )


def render_map(deck: pdk.Deck, height: Optional[int] = None) -> pdk.Deck:
    """Render a composed deck in Streamlit."""
    st.pydeck_chart(deck, use_container_width=True, height=height or settings.map.height)
    return deck
