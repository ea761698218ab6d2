# Visualization module
from .layers import LayerGroup, create_earthquake_layer, create_plate_layer
from .legend import build_legend, render_legend_html
from .map_view import compose_map, render_map
from .styling import choose_color, marker_size, style_info

__all__ = [
    "LayerGroup",
    "create_earthquake_layer",
    "create_plate_layer",
    "build_legend",
    "render_legend_html",
    "compose_map",
    "render_map",
    "choose_color",
    "marker_size",
    "style_info",
]
