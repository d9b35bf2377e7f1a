"""Tests for geobuffer/measurement.py."""
import pytest

from geobuffer.errors import MissingInputError
from geobuffer.measurement import centroid


def test_centroid_of_line():
    point = centroid({"type": "LineString", "coordinates": [[0, 0], [2, 4]]})
    assert point["type"] == "Point"
    assert point["coordinates"] == [1.0, 2.0]


def test_centroid_of_feature(square_feature):
    lon, lat = centroid(square_feature)["coordinates"]
    # closing vertex counted twice pulls the mean toward (10.0, 45.0)
    assert abs(lon - 10.04) < 1e-9
    assert abs(lat - 45.04) < 1e-9


def test_centroid_of_feature_collection():
    collection = {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {}, "geometry": {"type": "Point", "coordinates": [0, 0]}},
            {"type": "Feature", "properties": {}, "geometry": {"type": "Point", "coordinates": [4, 2]}},
            {"type": "Feature", "properties": {}, "geometry": None},
        ],
    }
    assert centroid(collection)["coordinates"] == [2.0, 1.0]


def test_centroid_without_coordinates():
    with pytest.raises(MissingInputError):
        centroid({"type": "LineString", "coordinates": []})
