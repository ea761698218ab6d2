"""Application configuration settings."""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv

load_dotenv()


_MAPBOX_ATTRIBUTION = (
    '&copy; <a href="https://www.mapbox.com/about/maps/">Mapbox</a> '
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors'
)
_TOPO_ATTRIBUTION = (
    'Map data: &copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a> contributors, '
    '<a href="http://viewfinderpanoramas.org">SRTM</a> | Map style: &copy; '
    '<a href="https://opentopomap.org">OpenTopoMap</a> '
    '(<a href="https://creativecommons.org/licenses/by-sa/3.0/">CC-BY-SA</a>)'
)


@dataclass
class FeedConfig:
    """Remote GeoJSON sources."""

    quake_url: str = field(
        default_factory=lambda: os.getenv(
            "QUAKE_FEED_URL",
            "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_month.geojson",
        )
    )
    plates_url: str = field(
        default_factory=lambda: os.getenv(
            "PLATES_URL",
            "https://raw.githubusercontent.com/fraxen/tectonicplates/master/GeoJSON/PB2002_boundaries.json",
        )
    )
    timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("FEED_TIMEOUT_SECONDS", "30"))
    )


@dataclass
class BaseMap:
    """A background tile layer, either a Mapbox style or a raw XYZ template."""

    name: str
    attribution: str
    map_style: Optional[str] = None
    tile_url: Optional[str] = None
    max_zoom: int = 18

    @property
    def requires_key(self) -> bool:
        return self.map_style is not None and self.map_style.startswith("mapbox://")


@dataclass
class MapConfig:
    """PyDeck map configuration."""

    # Continental US
    center_lat: float = 37.09
    center_lon: float = -95.71
    default_zoom: int = 4
    default_pitch: int = 0
    default_bearing: int = 0
    height: int = 800
    max_zoom: int = 18

    mapbox_api_key: Optional[str] = field(
        default_factory=lambda: os.getenv("MAPBOX_API_KEY") or None
    )

    default_base: str = "Satellite"
    base_maps: List[BaseMap] = field(
        default_factory=lambda: [
            BaseMap(
                name="Satellite",
                map_style="mapbox://styles/mapbox/satellite-v9",
                attribution=_MAPBOX_ATTRIBUTION,
            ),
            BaseMap(
                name="Dark",
                map_style="mapbox://styles/mapbox/dark-v10",
                attribution=_MAPBOX_ATTRIBUTION,
            ),
            BaseMap(
                name="Street",
                map_style="mapbox://styles/mapbox/outdoors-v11",
                attribution=_MAPBOX_ATTRIBUTION,
            ),
            BaseMap(
                name="Topographic Map",
                tile_url="https://a.tile.opentopomap.org/{z}/{x}/{y}.png",
                attribution=_TOPO_ATTRIBUTION,
            ),
        ]
    )

    # Overlay name -> initially visible
    overlays: Dict[str, bool] = field(
        default_factory=lambda: {
            "Earthquakes": True,
            "Fault Lines": False,
        }
    )


@dataclass
class StyleConfig:
    """Magnitude buckets and fixed layer styling."""

    # (exclusive lower bound, color), evaluated top to bottom
    magnitude_colors: List[Tuple[float, str]] = field(
        default_factory=lambda: [
            (5, "#FF0000"),
            (4, "#FF6900"),
            (3, "#FFC100"),
            (2, "#E5FF00"),
            (1, "#8DFF00"),
        ]
    )
    default_color: str = "#DAF7A6"
    marker_stroke_color: str = "#000000"
    marker_stroke_weight: float = 0.5
    legend_levels: List[int] = field(default_factory=lambda: [0, 1, 2, 3, 4, 5])

    plate_color: str = "#ff6700"
    plate_weight: int = 2


@dataclass
class Settings:
    """Main application settings."""

    feeds: FeedConfig = field(default_factory=FeedConfig)
    map: MapConfig = field(default_factory=MapConfig)
    style: StyleConfig = field(default_factory=StyleConfig)

    # Cache settings
    cache_ttl_seconds: int = field(
        default_factory=lambda: int(os.getenv("CACHE_TTL_SECONDS", "300"))
    )
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


# Singleton settings instance
settings = Settings()
