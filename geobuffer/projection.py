"""
Map Projection Factory

Builds a local transverse Mercator projection centered on a geometry so that
buffering can happen in planar meters, then be projected back to lon/lat.

The projection is a sphere of radius EARTH_RADIUS_METERS (the same radius the
unit table uses), so a planar distance of N meters matches N meters from the
unit converter. Distortion grows with distance from the center; it is
negligible for typical buffers of up to tens of kilometers.
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from geobuffer.coordinates import PairTransform, iter_positions
from geobuffer.errors import ProjectionError
from geobuffer.measurement import centroid
from geobuffer.units import EARTH_RADIUS_METERS
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_DISTORTION_WARNING_KM = 500


@dataclass(frozen=True)
class Projection:
    """
    Forward/inverse transform pair bound to one center.

    Attributes:
        center: (lon, lat) the projection is centered on
        forward: (lon, lat) -> (x, y) in meters
        inverse: (x, y) in meters -> (lon, lat)
    """
    center: Tuple[float, float]
    forward: PairTransform
    inverse: PairTransform


ProjectionFactory = Callable[[Tuple[float, float], float], Projection]


def _checked(transformer: Transformer, label: str) -> PairTransform:
    def apply(x: float, y: float) -> Tuple[float, float]:
        try:
            out_x, out_y = transformer.transform(x, y, errcheck=True)
        except ProjError as e:
            raise ProjectionError(f"{label} transform failed for ({x}, {y}): {e}") from e
        if not (math.isfinite(out_x) and math.isfinite(out_y)):
            raise ProjectionError(f"{label} transform produced non-finite output for ({x}, {y})")
        return out_x, out_y
    return apply


def transverse_mercator(center: Tuple[float, float],
                        earth_radius: float = EARTH_RADIUS_METERS) -> Projection:
    """
    Create a spherical transverse Mercator projection centered on a point.

    PROJ takes the center latitude-first (+lat_0, +lon_0) while positions
    stay lon/lat through always_xy. +lon_0 rotates the central meridian onto
    the center and +lat_0 moves the false origin to it, so the center maps
    to (0, 0).

    Args:
        center: (lon, lat) in degrees
        earth_radius: Sphere radius in meters, fixes the projection scale

    Returns:
        Projection bound to this center
    """
    lon, lat = center
    projected_crs = CRS.from_proj4(
        f"+proj=tmerc +lat_0={lat} +lon_0={lon} +k=1 +x_0=0 +y_0=0 "
        f"+R={earth_radius} +units=m +no_defs"
    )
    geographic_crs = projected_crs.geodetic_crs

    to_planar = Transformer.from_crs(geographic_crs, projected_crs, always_xy=True)
    to_geographic = Transformer.from_crs(projected_crs, geographic_crs, always_xy=True)

    return Projection(
        center=(lon, lat),
        forward=_checked(to_planar, 'Forward'),
        inverse=_checked(to_geographic, 'Inverse')
    )


def define_projection(geojson: Dict,
                      earth_radius: float = EARTH_RADIUS_METERS,
                      factory: Optional[ProjectionFactory] = None) -> Projection:
    """
    Build a projection centered on the centroid of a geometry or Feature.

    Args:
        geojson: GeoJSON geometry or Feature
        earth_radius: Sphere radius in meters
        factory: Projection factory, defaults to transverse_mercator

    Returns:
        Projection whose origin is the centroid of `geojson`
    """
    if factory is None:
        factory = transverse_mercator

    lon, lat = centroid(geojson)['coordinates']
    logger.debug(f"  - Projection center: ({lon:.6f}, {lat:.6f})")

    return factory((lon, lat), earth_radius)


def max_planar_extent(projected_geometry: Dict) -> float:
    """Largest distance in meters from the projection origin to any position."""
    return max(
        (math.hypot(position[0], position[1]) for position in iter_positions(projected_geometry)),
        default=0.0
    )


def warn_if_distorted(projected_geometry: Dict,
                      distance_meters: float,
                      warning_km: Optional[float] = DEFAULT_DISTORTION_WARNING_KM) -> bool:
    """
    Log a warning when a buffer reaches far from the projection center.

    Output is never altered; this only reports the accumulated distortion
    of a single-center projection.

    Returns:
        True if the warning threshold was exceeded
    """
    if not warning_km:
        return False

    reach_km = (max_planar_extent(projected_geometry) + distance_meters) / 1000
    if reach_km <= warning_km:
        return False

    logger.warning(f"Buffer reaches {reach_km:.0f} km from the projection center "
                   f"(threshold {warning_km} km)")
    logger.warning("Projection distortion may noticeably affect the buffered shape")
    return True
