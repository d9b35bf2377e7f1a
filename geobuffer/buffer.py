"""
Buffer Orchestrator

Public entry point for buffering GeoJSON. Dispatches on the container type
(FeatureCollection, GeometryCollection, Feature, bare geometry) and buffers
each feature either with the geodesic circle fast path (points) or through
the project -> planar buffer -> unproject pipeline (everything else).

GeometryCollection members are buffered independently and are NOT unioned;
the result is a FeatureCollection with one Feature per member.
"""

import math
import numbers
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Any, Callable, Dict, List, Optional

from geobuffer.circle import DEFAULT_STEPS, circle
from geobuffer.coordinates import transform_geometry
from geobuffer.engine import BufferEngine, ShapelyBufferEngine
from geobuffer.errors import InvalidRadiusError, InvalidStepsError, MissingInputError
from geobuffer.features import make_feature, make_feature_collection
from geobuffer.projection import (
    DEFAULT_DISTORTION_WARNING_KM,
    ProjectionFactory,
    define_projection,
    warn_if_distorted
)
from geobuffer.units import DEFAULT_UNITS, EARTH_RADIUS_METERS, check_units, distance_to_meters
from utils.logger import get_logger

logger = get_logger(__name__)


def _validate(geojson: Any, radius: Any, steps: Any) -> None:
    if not geojson:
        raise MissingInputError("geojson is required")

    if radius is None or isinstance(radius, bool) or not isinstance(radius, numbers.Real):
        raise InvalidRadiusError(f"radius is required and must be a number, got {radius!r}")
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidRadiusError(f"radius must be a finite number greater than 0, got {radius}")

    if steps is not None:
        if isinstance(steps, bool) or not isinstance(steps, numbers.Integral):
            raise InvalidStepsError(f"steps must be an integer, got {steps!r}")
        if steps <= 0:
            raise InvalidStepsError(f"steps must be greater than 0, got {steps}")


def buffer(geojson: Dict,
           radius: float,
           units: Optional[str] = None,
           steps: Optional[int] = None,
           *,
           engine: Optional[BufferEngine] = None,
           projection_factory: Optional[ProjectionFactory] = None,
           max_workers: int = 1,
           earth_radius: float = EARTH_RADIUS_METERS,
           distortion_warning_km: Optional[float] = DEFAULT_DISTORTION_WARNING_KM) -> Dict:
    """
    Buffer GeoJSON input by a radius.

    Output mirrors the input container:
    - Feature or bare geometry -> Feature
    - FeatureCollection -> FeatureCollection (same order, same length)
    - GeometryCollection -> FeatureCollection of independently buffered members

    Args:
        geojson: GeoJSON geometry, Feature, FeatureCollection or GeometryCollection
        radius: Buffer distance, must be > 0
        units: Unit of `radius` (default 'kilometers')
        steps: Vertices per full circle (default 64)
        engine: Planar buffer engine (default ShapelyBufferEngine())
        projection_factory: Projection factory (default transverse Mercator)
        max_workers: Thread pool size for collection members, 1 = sequential
        earth_radius: Sphere radius in meters for units, projection and circles
        distortion_warning_km: Log a warning past this reach from the
                               projection center; None disables it

    Returns:
        Buffered Feature or FeatureCollection; the input is never modified

    Raises:
        MissingInputError: If geojson (or a feature geometry) is missing
        InvalidRadiusError: If radius is missing or not > 0
        InvalidStepsError: If steps is given and not > 0
        InvalidUnitsError: If units is not supported
        BufferEngineError: If the planar engine fails on any member

    Example:
        >>> point = {'type': 'Feature', 'properties': {},
        ...          'geometry': {'type': 'Point', 'coordinates': [-90.548630, 14.616599]}}
        >>> buffered = buffer(point, 500, 'miles')
        >>> buffered['geometry']['type']
        'Polygon'
    """
    _validate(geojson, radius, steps)

    units = units or DEFAULT_UNITS
    check_units(units)
    if steps is None:
        steps = DEFAULT_STEPS

    buffer_one = partial(
        _buffer_feature,
        radius=radius,
        units=units,
        steps=steps,
        engine=engine or ShapelyBufferEngine(),
        projection_factory=projection_factory,
        earth_radius=earth_radius,
        distortion_warning_km=distortion_warning_km
    )

    geojson_type = geojson.get('type')

    if geojson_type == 'GeometryCollection':
        members = geojson.get('geometries') or []
        logger.info(f"Buffering GeometryCollection of {len(members)} geometries by {radius} {units}...")
        return make_feature_collection(_buffer_members(members, buffer_one, max_workers))

    if geojson_type == 'FeatureCollection':
        members = geojson.get('features') or []
        logger.info(f"Buffering FeatureCollection of {len(members)} feature(s) by {radius} {units}...")
        return make_feature_collection(_buffer_members(members, buffer_one, max_workers))

    return buffer_one(geojson)


def _buffer_members(members: List[Dict],
                    buffer_one: Callable[[Dict], Dict],
                    max_workers: int) -> List[Dict]:
    """Buffer collection members; results keep the member order."""
    if max_workers and max_workers > 1 and len(members) > 1:
        logger.debug(f"  - Buffering members on {max_workers} threads")
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            return list(executor.map(buffer_one, members))

    return [buffer_one(member) for member in members]


def _buffer_feature(geojson: Dict,
                    radius: float,
                    units: str,
                    steps: int,
                    engine: BufferEngine,
                    projection_factory: Optional[ProjectionFactory],
                    earth_radius: float,
                    distortion_warning_km: Optional[float]) -> Dict:
    """
    Buffer a single Feature or bare geometry into a Feature.

    Points go straight to the geodesic circle generator. Everything else is
    projected around its centroid, buffered in meters and unprojected.
    """
    is_feature = geojson.get('type') == 'Feature'
    properties = (geojson.get('properties') if is_feature else None) or {}
    feature_id = geojson.get('id') if is_feature else None
    geometry = geojson.get('geometry') if is_feature else geojson

    if not geometry:
        raise MissingInputError("Feature has no geometry to buffer")

    geom_type = geometry.get('type')

    if geom_type == 'Point':
        buffered = circle(geometry['coordinates'], radius, steps, units, properties, earth_radius)
        if feature_id is not None:
            buffered['id'] = feature_id
        return buffered

    logger.debug(f"Buffering {geom_type} by {radius} {units}")

    # Step 1: Radius to planar meters
    distance = distance_to_meters(radius, units, earth_radius)
    logger.debug(f"  - Buffer distance: {radius} {units} = {distance:.2f} m")

    # Step 2: Projection centered on the geometry
    projection = define_projection(geometry, earth_radius, projection_factory)

    # Step 3: Project to planar meters
    projected = transform_geometry(geometry, projection.forward)
    warn_if_distorted(projected, distance, distortion_warning_km)

    # Step 4: Planar buffer
    buffered = engine.offset(projected, distance, quad_segs=max(1, steps // 4))

    # Step 5: Back to lon/lat
    unprojected = transform_geometry(buffered, projection.inverse)

    return make_feature(unprojected, properties, feature_id)
