"""
Centroid finder.

The centroid anchors the local projection used for planar buffering, so it
only has to be representative of the geometry, not area-weighted.
"""

from typing import Dict

from geobuffer.coordinates import iter_positions
from geobuffer.errors import MissingInputError
from geobuffer.features import iter_geometries


def centroid(geojson: Dict) -> Dict:
    """
    Compute the centroid of a geometry, Feature or FeatureCollection.

    The centroid is the arithmetic mean of every position, including the
    closing position of polygon rings.

    Args:
        geojson: GeoJSON geometry, Feature or FeatureCollection

    Returns:
        GeoJSON Point geometry with [lon, lat] coordinates

    Raises:
        MissingInputError: If the input has no coordinates at all

    Example:
        >>> centroid({'type': 'LineString', 'coordinates': [[0, 0], [2, 4]]})
        {'type': 'Point', 'coordinates': [1.0, 2.0]}
    """
    sum_x = 0.0
    sum_y = 0.0
    count = 0

    for geometry in iter_geometries(geojson):
        for position in iter_positions(geometry):
            sum_x += position[0]
            sum_y += position[1]
            count += 1

    if count == 0:
        raise MissingInputError("Cannot compute centroid of a geometry without coordinates")

    return {
        'type': 'Point',
        'coordinates': [sum_x / count, sum_y / count]
    }
