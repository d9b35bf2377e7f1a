"""
Geodesic Circle Generator

Draws the buffer of a single point directly on the sphere. A point's buffer
is a circle, so no planar projection is needed.
"""

from typing import Dict, Optional, Sequence, Union

from pyproj import Geod

from geobuffer.errors import InvalidStepsError
from geobuffer.features import make_feature
from geobuffer.units import DEFAULT_UNITS, EARTH_RADIUS_METERS, distance_to_meters

DEFAULT_STEPS = 64

# A polygon ring needs at least three distinct vertices
MIN_CIRCLE_STEPS = 3


def _center_position(center: Union[Dict, Sequence[float]]) -> Sequence[float]:
    if isinstance(center, dict):
        geometry = center['geometry'] if center.get('type') == 'Feature' else center
        return geometry['coordinates']
    return center


def circle(center: Union[Dict, Sequence[float]],
           radius: float,
           steps: int = DEFAULT_STEPS,
           units: str = DEFAULT_UNITS,
           properties: Optional[Dict] = None,
           earth_radius: float = EARTH_RADIUS_METERS) -> Dict:
    """
    Create a geodesic circle polygon around a point.

    Vertices are found with Geod.fwd at evenly spaced azimuths, walking
    counterclockwise from north. The ring holds `steps` distinct vertices
    followed by a copy of the first one to close it.

    Args:
        center: [lon, lat], a Point geometry or a Point Feature
        radius: Circle radius in `units`
        steps: Number of vertices, at least MIN_CIRCLE_STEPS
        units: Unit of `radius`
        properties: Properties for the output Feature
        earth_radius: Sphere radius in meters

    Returns:
        GeoJSON Feature with a Polygon geometry

    Raises:
        InvalidStepsError: If steps is below MIN_CIRCLE_STEPS

    Example:
        >>> feature = circle([-90.548630, 14.616599], 500, units='miles')
        >>> len(feature['geometry']['coordinates'][0])
        65
    """
    if steps < MIN_CIRCLE_STEPS:
        raise InvalidStepsError(f"A circle needs at least {MIN_CIRCLE_STEPS} steps, got {steps}")

    lon, lat = _center_position(center)[:2]
    meters = distance_to_meters(radius, units, earth_radius)

    geod = Geod(a=earth_radius, f=0)
    azimuths = [-360.0 * i / steps for i in range(steps)]
    lons, lats, _ = geod.fwd([lon] * steps, [lat] * steps, azimuths, [meters] * steps)

    ring = [[x, y] for x, y in zip(lons, lats)]
    ring.append(list(ring[0]))

    return make_feature({'type': 'Polygon', 'coordinates': [ring]}, properties)
