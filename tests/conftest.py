"""Shared fixtures for geobuffer tests."""
import logging

import pytest
from pyproj import Geod

from geobuffer.units import EARTH_RADIUS_METERS


@pytest.fixture(scope="session")
def sphere_geod():
    """Geod on the same sphere the buffer pipeline uses."""
    return Geod(a=EARTH_RADIUS_METERS, f=0)


@pytest.fixture
def point_feature():
    """Point in Guatemala City with nested properties."""
    return {
        "type": "Feature",
        "properties": {"name": "Guatemala City", "tags": {"capital": True}, "pop": [1, 2, 3]},
        "geometry": {"type": "Point", "coordinates": [-90.548630, 14.616599]},
    }


@pytest.fixture
def square_feature():
    """0.1 degree square around (10.05, 45.05)."""
    return {
        "type": "Feature",
        "id": "sq-1",
        "properties": {"kind": "square"},
        "geometry": {
            "type": "Polygon",
            "coordinates": [[
                [10.0, 45.0], [10.1, 45.0], [10.1, 45.1], [10.0, 45.1], [10.0, 45.0],
            ]],
        },
    }


@pytest.fixture
def line_feature():
    return {
        "type": "Feature",
        "properties": {"kind": "line"},
        "geometry": {
            "type": "LineString",
            "coordinates": [[-122.45, 37.75], [-122.40, 37.78], [-122.38, 37.80]],
        },
    }


@pytest.fixture
def bowtie_polygon():
    """Self-intersecting polygon."""
    return {
        "type": "Polygon",
        "coordinates": [[[0, 0], [2, 2], [2, 0], [0, 2], [0, 0]]],
    }


@pytest.fixture
def reset_logging():
    """Drop handlers installed by setup_logging() after a test."""
    yield
    logger = logging.getLogger("geobuffer")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
