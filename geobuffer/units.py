"""
Unit Conversion Module

Converts buffer distances between real-world units, meters and angular
distance on a spherical Earth.

Linear units have a fixed length in meters. Angular units ('degrees',
'radians') measure arc along a great circle, so their length in meters
depends on the sphere radius.
"""

from typing import Dict

from geobuffer.errors import InvalidUnitsError

# Mean Earth radius used by the angular units and the projection scale
EARTH_RADIUS_METERS = 6373000

DEFAULT_UNITS = 'kilometers'

# Meters per unit
LINEAR_UNITS: Dict[str, float] = {
    'meters': 1.0,
    'metres': 1.0,
    'centimeters': 0.01,
    'centimetres': 0.01,
    'kilometers': 1000.0,
    'kilometres': 1000.0,
    'inches': 0.0254,
    'feet': 0.3048,
    'yards': 0.9144,
    'miles': 1609.344,
    'nauticalmiles': 1852.0,
}

# Units per radian
ANGULAR_UNITS: Dict[str, float] = {
    'radians': 1.0,
    'degrees': 57.2957795,
}


def check_units(units: str) -> str:
    """
    Make sure a unit name is supported.

    Returns:
        The unit name, unchanged

    Raises:
        InvalidUnitsError: If the unit name is not supported
    """
    if isinstance(units, str) and (units in LINEAR_UNITS or units in ANGULAR_UNITS):
        return units
    supported = ', '.join(sorted({**LINEAR_UNITS, **ANGULAR_UNITS}))
    raise InvalidUnitsError(f"Unsupported units '{units}' (expected one of: {supported})")


def distance_to_meters(distance: float,
                       units: str = DEFAULT_UNITS,
                       earth_radius: float = EARTH_RADIUS_METERS) -> float:
    """
    Convert a distance in any supported unit to meters.

    Args:
        distance: Distance expressed in `units`
        units: Unit name
        earth_radius: Sphere radius in meters, only used by angular units

    Example:
        >>> distance_to_meters(500, 'miles')
        804672.0
    """
    check_units(units)
    if units in ANGULAR_UNITS:
        return distance / ANGULAR_UNITS[units] * earth_radius
    return distance * LINEAR_UNITS[units]


def distance_to_radians(distance: float,
                        units: str = DEFAULT_UNITS,
                        earth_radius: float = EARTH_RADIUS_METERS) -> float:
    """Convert a distance in `units` to an angle in radians."""
    return distance_to_meters(distance, units, earth_radius) / earth_radius


def radians_to_distance(radians: float,
                        units: str = DEFAULT_UNITS,
                        earth_radius: float = EARTH_RADIUS_METERS) -> float:
    """Convert an angle in radians to a distance in `units`."""
    check_units(units)
    if units in ANGULAR_UNITS:
        return radians * ANGULAR_UNITS[units]
    return radians * earth_radius / LINEAR_UNITS[units]
