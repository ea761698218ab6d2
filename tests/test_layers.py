"""Tests for the earthquake and plate-boundary layer factories."""

import pandas as pd
import pytest

from tests.conftest import make_quake
from visualization.layers import (
    EARTHQUAKES,
    FAULT_LINES,
    FRAME_COLUMNS,
    LayerGroup,
    build_earthquake_frame,
    create_earthquake_layer,
    create_plate_layer,
    load_earthquake_layer,
    load_plate_layer,
)


class TestBuildEarthquakeFrame:
    """Tests for build_earthquake_frame()."""

    def test_one_row_per_feature(self, quake_collection):
        frame = build_earthquake_frame(quake_collection)

        assert len(frame) == len(quake_collection["features"])
        assert list(frame.columns) == FRAME_COLUMNS
        assert list(frame["id"]) == ["a", "b", "c", "d", "e"]

    def test_coordinates(self, quake_collection):
        frame = build_earthquake_frame(quake_collection)

        assert frame.loc[0, "lon"] == -120.5
        assert frame.loc[0, "lat"] == 36.2
        assert frame.loc[0, "depth"] == 8.0

    def test_styling_columns(self, quake_collection):
        frame = build_earthquake_frame(quake_collection)

        assert frame.loc[0, "fill_color"] == [255, 0, 0, 255]
        assert frame.loc[0, "line_color"] == [0, 0, 0, 255]
        assert frame.loc[0, "radius"] == pytest.approx(18.3)
        assert frame.loc[2, "radius"] == 1

    def test_missing_magnitude_uses_default_bucket(self, quake_collection):
        frame = build_earthquake_frame(quake_collection)
        row = frame[frame["id"] == "d"].iloc[0]

        assert row["fill_color"] == [218, 247, 166, 255]
        assert row["radius"] == 0

    def test_popup_contains_place_time_and_magnitude(self, quake_collection):
        frame = build_earthquake_frame(quake_collection)

        for feature, popup in zip(quake_collection["features"], frame["popup"]):
            assert feature["properties"]["place"] in popup
            assert f"Magnitude: {feature['properties']['mag']}" in popup

        assert "Tue Nov 14 2023 22:13:20 UTC" in frame.loc[0, "popup"]

    def test_popup_escapes_markup(self):
        frame = build_earthquake_frame(
            {"type": "FeatureCollection", "features": [make_quake(3.0, place="<b>Bad</b>")]}
        )

        assert "<b>Bad</b>" not in frame.loc[0, "popup"]
        assert "&lt;b&gt;Bad&lt;/b&gt;" in frame.loc[0, "popup"]

    def test_missing_time(self):
        frame = build_earthquake_frame(
            {"type": "FeatureCollection", "features": [make_quake(3.0, time=None)]}
        )

        assert frame.loc[0, "time_display"] == "Unknown"

    def test_feature_without_geometry_is_kept(self):
        feature = make_quake(3.0)
        feature["geometry"] = None
        frame = build_earthquake_frame({"type": "FeatureCollection", "features": [feature]})

        assert len(frame) == 1
        assert pd.isna(frame.loc[0, "lon"])

    def test_malformed_features_are_kept(self):
        """Non-object properties, geometry or coordinates still yield one row each."""
        bad_properties = make_quake(3.0, fid="p")
        bad_properties["properties"] = ["not", "a", "dict"]
        bad_geometry = make_quake(4.2, place="Bad geometry", fid="g")
        bad_geometry["geometry"] = "POINT (1 2)"
        bad_coords = make_quake(1.5, place="Bad coordinates", fid="c")
        bad_coords["geometry"]["coordinates"] = "1,2"
        features = [
            make_quake(5.5, place="Good one", fid="a"),
            bad_properties,
            bad_geometry,
            bad_coords,
            "not a feature",
        ]

        frame = build_earthquake_frame({"type": "FeatureCollection", "features": features})

        assert len(frame) == 5
        assert frame.loc[1, "fill_color"] == [218, 247, 166, 255]
        assert frame.loc[1, "radius"] == 0
        assert pd.isna(frame.loc[2, "lon"])
        assert "Bad geometry" in frame.loc[2, "popup"]
        assert pd.isna(frame.loc[3, "lat"])

    def test_empty_collection(self):
        frame = build_earthquake_frame({"type": "FeatureCollection", "features": []})

        assert frame.empty
        assert list(frame.columns) == FRAME_COLUMNS


class TestCreateLayers:
    """Tests for the pydeck layer factories."""

    def test_earthquake_layer(self, quake_collection):
        layer = create_earthquake_layer(build_earthquake_frame(quake_collection))

        assert layer.type == "ScatterplotLayer"
        assert layer.id == "earthquakes"

    def test_empty_earthquake_layer(self):
        layer = create_earthquake_layer(pd.DataFrame(columns=FRAME_COLUMNS))

        assert layer.type == "ScatterplotLayer"

    def test_plate_layer_is_uniform(self, plate_collection):
        layer = create_plate_layer(plate_collection)

        assert layer.type == "GeoJsonLayer"
        assert layer.get_line_color == [255, 103, 0, 255]
        assert layer.get_line_width == 2
        assert layer.pickable is False


class TestLayerGroup:
    """Tests for LayerGroup and the group loaders."""

    def test_starts_empty(self):
        group = LayerGroup(name=EARTHQUAKES)

        assert len(group) == 0
        assert group.layers == []

    def test_load_earthquakes(self, quake_collection):
        group = LayerGroup(name=EARTHQUAKES)
        frame = load_earthquake_layer(group, quake_collection)

        assert len(group) == 5
        assert len(frame) == 5
        assert len(group.layers) == 1

    def test_load_plates(self, plate_collection):
        group = LayerGroup(name=FAULT_LINES)
        load_plate_layer(group, plate_collection)

        assert len(group) == 2
        assert group.layers[0].type == "GeoJsonLayer"
