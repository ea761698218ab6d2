"""Static magnitude legend drawn over the map."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from config.settings import settings
from .styling import choose_color

logger = logging.getLogger("quake_map.visualization.legend")


@dataclass(frozen=True)
class LegendEntry:
    """One legend row: a color swatch and the magnitude range it covers."""

    threshold: float
    color: str
    label: str


def build_legend(levels: Optional[Sequence[float]] = None) -> List[LegendEntry]:
    """
    Build one row per magnitude threshold.

    Each row is colored as a magnitude one above its threshold would be, and
    labelled "k–k+1"; the last row is open ended ("k+").

    Args:
        levels: Ascending thresholds (defaults to 0..5 from settings)

    Returns:
        List of LegendEntry
    """
    if levels is None:
        levels = settings.style.legend_levels

    entries = []
    for i, level in enumerate(levels):
        if i + 1 < len(levels):
            label = f"{level}–{levels[i + 1]}"
        else:
            label = f"{level}+"
        entries.append(LegendEntry(threshold=level, color=choose_color(level + 1), label=label))
    return entries


def render_legend_html(entries: Sequence[LegendEntry], title: str = "Magnitude") -> str:
    """Render the legend as a floating bottom-left panel."""
    rows = "".join(
        f"""
            <div class="legend-row">
                <span class="legend-swatch" style="background-color: {entry.color};"></span>
                <span class="legend-label">{entry.label}</span>
            </div>"""
        for entry in entries
    )

    html = f"""
        <div class="map-legend">
            <h3>{title}</h3>{rows}
        </div>
        """
    logger.debug(f"Legend markup:{html}")
    return html


LEGEND_CSS = """
<style>
.map-legend {
    position: fixed;
    bottom: 24px;
    left: 24px;
    z-index: 50;
    background: rgba(255, 255, 255, 0.92);
    border-radius: 6px;
    padding: 8px 14px;
    box-shadow: 0 1px 5px rgba(0, 0, 0, 0.4);
    font-family: system-ui, sans-serif;
    color: #222;
}
.map-legend h3 {
    font-size: 14px;
    margin: 0 0 6px 0;
    padding: 0;
}
.map-legend .legend-row {
    display: flex;
    align-items: center;
    gap: 8px;
    font-size: 12px;
    line-height: 20px;
}
.map-legend .legend-swatch {
    width: 18px;
    height: 18px;
    display: inline-block;
    border: 1px solid rgba(0, 0, 0, 0.3);
}
</style>
"""
