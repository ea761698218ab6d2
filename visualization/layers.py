"""PyDeck layer factories for the earthquake and plate-boundary overlays."""

import logging
from dataclasses import dataclass, field
from html import escape
from typing import Any, Dict, List, Mapping

import pandas as pd
import pydeck as pdk

from config.settings import settings
from .styling import hex_to_rgba, style_info

logger = logging.getLogger("quake_map.visualization.layers")

EARTHQUAKES = "Earthquakes"
FAULT_LINES = "Fault Lines"

FRAME_COLUMNS = [
    "id", "lon", "lat", "depth", "mag", "place", "time", "time_display",
    "fill_color", "line_color", "radius", "popup",
]

# Only these columns are shipped to the browser
_LAYER_COLUMNS = ["lon", "lat", "fill_color", "line_color", "radius", "popup"]


@dataclass
class LayerGroup:
  """Named collection of rendered layers, toggled as a single overlay."""
  name: str
  layers: List[pdk.Layer] = field(default_factory=list)
  item_count: int = 0

  def add(self, layer: pdk.Layer, item_count: int) -> None:
    """Add a layer that renders `item_count` markers or shapes."""
    self.layers.append(layer)
    self.item_count += item_count

  def __len__(self) -> int:
    return self.item_count


def _format_popup(place: Any, time_display: str, magnitude: Any) -> str:
  return (
      f"<h4>Location: {escape(str(place))}</h4>"
      f"<hr><p>Date &amp; Time: {escape(time_display)}</p>"
      f"<hr><p>Magnitude: {escape(str(magnitude))}</p>"
  )


def _format_time(epoch_ms: Any) -> str:
  """Readable UTC timestamp for epoch milliseconds."""
  try:
    stamp = pd.to_datetime(epoch_ms, unit="ms", utc=True)
  except (TypeError, ValueError, OverflowError):
    return "Unknown"
  if pd.isna(stamp):
    return "Unknown"
  return stamp.strftime("%a %b %d %Y %H:%M:%S UTC")


def _as_mapping(value: Any) -> Mapping[str, Any]:
  """Treat anything that is not a mapping as empty."""
  return value if isinstance(value, Mapping) else {}


def _point_coordinates(feature: Mapping[str, Any]) -> List[Any]:
  geometry = _as_mapping(feature.get("geometry"))
  coords = geometry.get("coordinates") if geometry.get("type") == "Point" else None
  coords = list(coords) if isinstance(coords, (list, tuple)) else []
  return (coords + [None, None, None])[:3]


def build_earthquake_frame(collection: Mapping[str, Any]) -> pd.DataFrame:
  """
  Flatten an earthquake FeatureCollection into one row per feature.

  Args:
      collection: GeoJSON FeatureCollection with point features

  Returns:
      DataFrame with FRAME_COLUMNS, one row per input feature, in order
  """
  rows: List[Dict[str, Any]] = []

  for feature in collection.get("features") or []:
    feature = _as_mapping(feature)
    properties = _as_mapping(feature.get("properties"))
    lon, lat, depth = _point_coordinates(feature)
    style = style_info(properties)
    time_display = _format_time(properties.get("time"))

    rows.append({
        "id": feature.get("id"),
        "lon": lon,
        "lat": lat,
        "depth": depth,
        "mag": properties.get("mag"),
        "place": properties.get("place"),
        "time": properties.get("time"),
        "time_display": time_display,
        "fill_color": hex_to_rgba(style.fill_color, int(255 * style.fill_opacity)),
        "line_color": hex_to_rgba(style.color, int(255 * style.opacity)),
        "radius": style.radius,
        "popup": _format_popup(properties.get("place"), time_display, properties.get("mag")),
    })

  if not rows:
    return pd.DataFrame(columns=FRAME_COLUMNS)

  frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
  frame["lon"] = pd.to_numeric(frame["lon"], errors="coerce")
  frame["lat"] = pd.to_numeric(frame["lat"], errors="coerce")
  return frame


def create_earthquake_layer(frame: pd.DataFrame) -> pdk.Layer:
  """
  Create a ScatterplotLayer of circle markers sized and colored by magnitude.

  Rows without a usable position stay in the frame but are not drawn.
  """
  if frame.empty:
    return pdk.Layer(
        "ScatterplotLayer",
        data=[],
        get_position="[lon, lat]",
    )

  data = frame.dropna(subset=["lon", "lat"])[_LAYER_COLUMNS]

  return pdk.Layer(
      "ScatterplotLayer",
      id="earthquakes",
      data=data,
      get_position="[lon, lat]",
      get_fill_color="fill_color",
      get_line_color="line_color",
      get_radius="radius",
      radius_units="pixels",
      radius_min_pixels=1,
      stroked=True,
      filled=True,
      line_width_units="pixels",
      get_line_width=settings.style.marker_stroke_weight,
      opacity=1,
      pickable=True,
      auto_highlight=True,
  )


def create_plate_layer(collection: Mapping[str, Any]) -> pdk.Layer:
  """
  Create a GeoJsonLayer drawing every boundary with one color and weight.

  Args:
      collection: GeoJSON FeatureCollection of lines or polygons

  Returns:
      GeoJsonLayer
  """
  return pdk.Layer(
      "GeoJsonLayer",
      id="fault-lines",
      data=dict(collection),
      stroked=True,
      filled=False,
      get_line_color=hex_to_rgba(settings.style.plate_color),
      get_line_width=settings.style.plate_weight,
      line_width_units="pixels",
      line_width_min_pixels=settings.style.plate_weight,
      pickable=False,
  )


def load_earthquake_layer(group: LayerGroup, collection: Mapping[str, Any]) -> pd.DataFrame:
  """Render every earthquake feature into `group` and return the marker frame."""
  frame = build_earthquake_frame(collection)
  group.add(create_earthquake_layer(frame), len(frame))
  logger.info(f"{group.name}: {len(frame)} markers")
  return frame


def load_plate_layer(group: LayerGroup, collection: Mapping[str, Any]) -> None:
  """Render the plate boundaries into `group`."""
  features = collection.get("features") or []
  group.add(create_plate_layer(collection), len(features))
  logger.info(f"{group.name}: {len(features)} boundary features")
