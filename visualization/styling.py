"""Magnitude-based marker styling shared by the earthquake layer and the legend."""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from config.settings import settings


@dataclass(frozen=True)
class MarkerStyle:
    """Circle marker style derived from a single magnitude."""

    fill_color: str
    color: str
    radius: float
    opacity: float = 1.0
    fill_opacity: float = 1.0
    stroke: bool = True
    weight: float = 0.5


def _as_magnitude(value: Any) -> Optional[float]:
    """Coerce a raw `mag` property to float, or None when unusable."""
    if value is None or isinstance(value, bool):
        return None
    try:
        magnitude = float(value)
    except (TypeError, ValueError):
        return None
    if magnitude != magnitude:  # NaN
        return None
    return magnitude


def marker_size(magnitude: Any) -> float:
    """
    Marker radius in pixels.

    Zero maps to 1 and everything else to three times the magnitude.
    Missing magnitudes give 0; negative ones are not clamped here.
    """
    magnitude = _as_magnitude(magnitude)
    if magnitude is None:
        return 0
    if magnitude == 0:
        return 1
    return magnitude * 3


def choose_color(magnitude: Any) -> str:
    """Hex fill color for a magnitude; bucket bounds are exclusive."""
    magnitude = _as_magnitude(magnitude)
    if magnitude is not None:
        for lower_bound, color in settings.style.magnitude_colors:
            if magnitude > lower_bound:
                return color
    return settings.style.default_color


def style_info(properties: Optional[Mapping[str, Any]]) -> MarkerStyle:
    """Build the marker style for a feature's properties."""
    magnitude = (properties or {}).get("mag")
    return MarkerStyle(
        fill_color=choose_color(magnitude),
        color=settings.style.marker_stroke_color,
        radius=marker_size(magnitude),
        weight=settings.style.marker_stroke_weight,
    )


def hex_to_rgba(hex_color: str, alpha: int = 255) -> List[int]:
    """Convert '#RRGGBB' to the [r, g, b, a] lists deck.gl accessors expect."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return [int(value[i:i + 2], 16) for i in (0, 2, 4)] + [alpha]
