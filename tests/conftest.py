"""Shared fixtures for the earthquake map tests."""

import sys
from pathlib import Path

import pytest

# Make the flat top-level packages importable without installation
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))


def make_quake(mag, place="10km N of Somewhere, CA", time=1700000000000, coords=(-120.5, 36.2, 8.0), fid=None):
    return {
        "type": "Feature",
        "id": fid or f"us{place[:3]}{mag}",
        "properties": {"mag": mag, "place": place, "time": time},
        "geometry": {"type": "Point", "coordinates": list(coords)},
    }


@pytest.fixture
def quake_collection():
    """Small FeatureCollection covering every color bucket and a missing magnitude."""
    return {
        "type": "FeatureCollection",
        "features": [
            make_quake(6.1, place="Off the coast of Chile", fid="a"),
            make_quake(4.5, place="Papua New Guinea", fid="b"),
            make_quake(0, place="Ridgecrest, CA", fid="c"),
            make_quake(None, place="Unknown event", fid="d"),
            make_quake(2.3, place="Anchorage, Alaska", fid="e"),
        ],
    }


@pytest.fixture
def plate_collection():
    """Two boundaries with different properties."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "properties": {"Name": "AF-AN", "LAYER": "plate boundary"},
                "geometry": {"type": "LineString", "coordinates": [[-0.4, -54.8], [0.1, -54.6]]},
            },
            {
                "type": "Feature",
                "properties": {"Name": "NA-PA", "Type": "transform"},
                "geometry": {"type": "LineString", "coordinates": [[-122.0, 37.0], [-121.0, 36.0]]},
            },
        ],
    }
