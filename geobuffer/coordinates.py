"""
Coordinate Tree Transformer

Applies a coordinate-pair transform (projection forward or inverse) to every
position of a GeoJSON geometry, preserving nesting depth and order.

The nesting depth is looked up from the geometry type, then a depth-specific
helper walks the coordinates:

    depth 0: Point                          [x, y]
    depth 1: LineString, MultiPoint         [[x, y], ...]
    depth 2: Polygon, MultiLineString       [[[x, y], ...], ...]
    depth 3: MultiPolygon                   [[[[x, y], ...], ...], ...]

Extra ordinates (altitude, measure) are carried through unchanged.
"""

from typing import Callable, Dict, Iterator, List, Sequence, Tuple

from geobuffer.errors import UnsupportedGeometryError

PairTransform = Callable[[float, float], Tuple[float, float]]

GEOMETRY_DEPTHS = {
    'Point': 0,
    'MultiPoint': 1,
    'LineString': 1,
    'Polygon': 2,
    'MultiLineString': 2,
    'MultiPolygon': 3,
}


def geometry_depth(geom_type: str) -> int:
    """
    Return the coordinate nesting depth for a GeoJSON geometry type.

    Raises:
        UnsupportedGeometryError: For GeometryCollection or unknown types
    """
    try:
        return GEOMETRY_DEPTHS[geom_type]
    except (KeyError, TypeError):
        raise UnsupportedGeometryError(f"Unsupported geometry type: {geom_type}")


def _transform_position(position: Sequence[float], func: PairTransform) -> List[float]:
    x, y = func(position[0], position[1])
    return [x, y] + list(position[2:])


def _transform_positions(positions, func: PairTransform) -> List:
    return [_transform_position(position, func) for position in positions]


def _transform_rings(rings, func: PairTransform) -> List:
    return [_transform_positions(ring, func) for ring in rings]


def _transform_polygons(polygons, func: PairTransform) -> List:
    return [_transform_rings(rings, func) for rings in polygons]


_TRANSFORMERS = {
    0: _transform_position,
    1: _transform_positions,
    2: _transform_rings,
    3: _transform_polygons,
}


def transform_coordinates(geom_type: str, coordinates, func: PairTransform) -> List:
    """
    Transform the coordinates of a single (non-collection) geometry.

    Args:
        geom_type: GeoJSON geometry type, selects the nesting depth
        coordinates: Nested coordinate lists for that type
        func: Pair transform called as func(x, y) -> (x', y')

    Returns:
        New nested lists with the same shape as `coordinates`
    """
    return _TRANSFORMERS[geometry_depth(geom_type)](coordinates, func)


def transform_geometry(geometry: Dict, func: PairTransform) -> Dict:
    """
    Transform every position of a GeoJSON geometry.

    GeometryCollections are walked member by member. The input mapping is
    not modified; a new geometry mapping is returned.

    Example:
        >>> transform_geometry({'type': 'Point', 'coordinates': [1, 2]},
        ...                    lambda x, y: (x * 10, y * 10))
        {'type': 'Point', 'coordinates': [10, 20]}
    """
    geom_type = geometry.get('type')

    if geom_type == 'GeometryCollection':
        return {
            'type': 'GeometryCollection',
            'geometries': [transform_geometry(member, func)
                           for member in geometry.get('geometries', [])]
        }

    return {
        'type': geom_type,
        'coordinates': transform_coordinates(geom_type, geometry.get('coordinates'), func)
    }


def _iter_depth(coordinates, depth: int) -> Iterator[Sequence[float]]:
    if depth == 0:
        yield coordinates
        return
    for child in coordinates:
        yield from _iter_depth(child, depth - 1)


def iter_positions(geometry: Dict) -> Iterator[Sequence[float]]:
    """Yield every position of a geometry (GeometryCollections included)."""
    geom_type = geometry.get('type')

    if geom_type == 'GeometryCollection':
        for member in geometry.get('geometries', []):
            yield from iter_positions(member)
        return

    yield from _iter_depth(geometry.get('coordinates'), geometry_depth(geom_type))
