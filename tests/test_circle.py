"""Tests for geobuffer/circle.py."""
import pytest
from pyproj import Geod
from shapely.geometry import LinearRing, Polygon

from geobuffer.circle import circle
from geobuffer.errors import InvalidStepsError


def test_ring_is_closed_with_steps_vertices():
    feature = circle([-90.548630, 14.616599], 500, units="miles")
    ring = feature["geometry"]["coordinates"][0]
    assert feature["type"] == "Feature"
    assert feature["geometry"]["type"] == "Polygon"
    assert len(ring) == 65
    assert ring[0] == ring[-1]


def test_vertices_at_radius(sphere_geod):
    lon, lat = -90.548630, 14.616599
    feature = circle([lon, lat], 500, steps=64, units="miles")
    for x, y in feature["geometry"]["coordinates"][0]:
        _, _, dist = sphere_geod.inv(lon, lat, x, y)
        assert abs(dist - 804672) < 0.01


def test_custom_steps():
    feature = circle([0, 0], 1, steps=8)
    assert len(feature["geometry"]["coordinates"][0]) == 9


def test_ring_is_counterclockwise():
    feature = circle([10, 50], 5, steps=32)
    assert LinearRing(feature["geometry"]["coordinates"][0]).is_ccw


def test_first_vertex_is_due_north(sphere_geod):
    feature = circle([10, 50], 5, steps=16, units="kilometers")
    x, y = feature["geometry"]["coordinates"][0][0]
    assert abs(x - 10) < 1e-9
    assert y > 50


def test_properties_are_copied():
    properties = {"name": "site", "tags": ["a", "b"]}
    feature = circle([0, 0], 1, properties=properties)
    assert feature["properties"] == properties
    assert feature["properties"]["tags"] is not properties["tags"]


def test_accepts_point_geometry_and_feature():
    point = {"type": "Point", "coordinates": [5, 5]}
    from_geometry = circle(point, 2)
    from_feature = circle({"type": "Feature", "properties": {}, "geometry": point}, 2)
    from_list = circle([5, 5], 2)
    assert from_geometry["geometry"] == from_list["geometry"]
    assert from_feature["geometry"] == from_list["geometry"]


def test_empty_properties_by_default():
    assert circle([0, 0], 1)["properties"] == {}


@pytest.mark.parametrize("steps", [1, 2])
def test_too_few_steps_for_a_ring(steps):
    with pytest.raises(InvalidStepsError):
        circle([0, 0], 1, steps=steps)


def test_three_steps_make_a_valid_triangle():
    feature = circle([0, 0], 1, steps=3)
    polygon = Polygon(feature["geometry"]["coordinates"][0])
    assert len(feature["geometry"]["coordinates"][0]) == 4
    assert polygon.is_valid


def test_linear_radius_independent_of_sphere():
    geod = Geod(a=6371008.8, f=0)
    feature = circle([0, 0], 1000, units="meters", earth_radius=6371008.8)
    for x, y in feature["geometry"]["coordinates"][0]:
        _, _, dist = geod.inv(0, 0, x, y)
        assert abs(dist - 1000) < 1e-3
