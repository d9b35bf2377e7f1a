"""Tests for geobuffer/projection.py."""
import logging
import math

import pytest

from geobuffer.errors import ProjectionError
from geobuffer.projection import (
    Projection,
    _checked,
    define_projection,
    max_planar_extent,
    transverse_mercator,
    warn_if_distorted,
)
from geobuffer.units import EARTH_RADIUS_METERS


@pytest.fixture(scope="module")
def alps():
    return transverse_mercator((10.0, 45.0))


# --- transverse_mercator ---

def test_center_maps_to_origin(alps):
    x, y = alps.forward(10.0, 45.0)
    assert abs(x) < 1e-6
    assert abs(y) < 1e-6


def test_projection_keeps_center(alps):
    assert alps.center == (10.0, 45.0)


def test_meridian_distance_is_meters(alps):
    _, y = alps.forward(10.0, 45.01)
    expected = EARTH_RADIUS_METERS * math.radians(0.01)
    assert abs(y - expected) < 1e-3


def test_parallel_distance_is_meters(alps):
    x, _ = alps.forward(10.01, 45.0)
    expected = EARTH_RADIUS_METERS * math.cos(math.radians(45.0)) * math.radians(0.01)
    assert abs(x - expected) < 1e-2


@pytest.mark.parametrize("lon, lat", [
    (10.0, 45.0),
    (14.0, 45.0),
    (6.0, 47.5),
    (12.5, 41.0),
    (9.9, 49.0),
    (5.0, 42.0),
])
def test_round_trip_within_500km(alps, lon, lat):
    x, y = alps.forward(lon, lat)
    back_lon, back_lat = alps.inverse(x, y)
    assert abs(back_lon - lon) < 1e-6
    assert abs(back_lat - lat) < 1e-6


def test_round_trip_southern_hemisphere():
    projection = transverse_mercator((-58.38, -34.6))
    x, y = projection.forward(-57.0, -33.0)
    lon, lat = projection.inverse(x, y)
    assert abs(lon + 57.0) < 1e-6
    assert abs(lat + 33.0) < 1e-6


def test_scale_follows_earth_radius():
    small = transverse_mercator((0.0, 0.0), earth_radius=1000)
    _, y = small.forward(0.0, 1.0)
    assert abs(y - 1000 * math.radians(1.0)) < 1e-6


# --- _checked ---

class _FakeTransformer:
    def __init__(self, result):
        self.result = result

    def transform(self, x, y, errcheck=False):
        return self.result


def test_non_finite_output_raises():
    apply = _checked(_FakeTransformer((math.inf, 0.0)), "Forward")
    with pytest.raises(ProjectionError, match="non-finite"):
        apply(1.0, 2.0)


def test_finite_output_passes_through():
    apply = _checked(_FakeTransformer((3.0, 4.0)), "Forward")
    assert apply(1.0, 2.0) == (3.0, 4.0)


# --- define_projection ---

def test_define_projection_uses_centroid(square_feature):
    projection = define_projection(square_feature)
    lon, lat = projection.center
    assert abs(lon - 10.04) < 1e-9
    assert abs(lat - 45.04) < 1e-9


def test_define_projection_custom_factory(line_feature):
    calls = []

    def factory(center, earth_radius):
        calls.append((center, earth_radius))
        return Projection(center=center, forward=lambda x, y: (x, y), inverse=lambda x, y: (x, y))

    projection = define_projection(line_feature["geometry"], earth_radius=42, factory=factory)
    assert len(calls) == 1
    assert calls[0][1] == 42
    assert projection.forward(1, 2) == (1, 2)


# --- distortion warning ---

def test_max_planar_extent():
    geometry = {"type": "LineString", "coordinates": [[3, 4], [-6, 8]]}
    assert max_planar_extent(geometry) == 10.0


def test_warns_for_far_reaching_buffer(caplog):
    geometry = {"type": "LineString", "coordinates": [[0, 0], [600000, 0]]}
    with caplog.at_level(logging.WARNING, logger="geobuffer"):
        assert warn_if_distorted(geometry, 1000, warning_km=500) is True
    assert "projection center" in caplog.text


def test_no_warning_for_local_buffer(caplog):
    geometry = {"type": "LineString", "coordinates": [[0, 0], [5000, 0]]}
    with caplog.at_level(logging.WARNING, logger="geobuffer"):
        assert warn_if_distorted(geometry, 1000, warning_km=500) is False
    assert caplog.text == ""


def test_warning_disabled():
    geometry = {"type": "LineString", "coordinates": [[0, 0], [6000000, 0]]}
    assert warn_if_distorted(geometry, 1000, warning_km=None) is False
