# Feeds module
from .client import fetch_geojson, fetch_geojson_cached
from .exceptions import FeedError, FeedFormatError, FeedHTTPError
from .loader import FeedResult, fetch_all, load_layer_groups

__all__ = [
    "fetch_geojson",
    "fetch_geojson_cached",
    "FeedError",
    "FeedFormatError",
    "FeedHTTPError",
    "FeedResult",
    "fetch_all",
    "load_layer_groups",
]
