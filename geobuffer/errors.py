"""
Exceptions raised by the buffering pipeline.

Validation errors also derive from ValueError so callers that already
catch ValueError for bad input keep working.
"""

from typing import Dict, Optional


class GeoBufferError(Exception):
    """Base class for all buffering errors."""


class MissingInputError(GeoBufferError, ValueError):
    """Input GeoJSON (or a feature's geometry) is absent."""


class InvalidRadiusError(GeoBufferError, ValueError):
    """Radius is absent, zero or negative."""


class InvalidStepsError(GeoBufferError, ValueError):
    """Steps was given but is not a positive integer."""


class InvalidUnitsError(GeoBufferError, ValueError):
    """Units name is not in the supported unit table."""


class UnsupportedGeometryError(GeoBufferError, ValueError):
    """Geometry tag is not one of the GeoJSON geometry types."""


class ProjectionError(GeoBufferError):
    """Coordinates could not be projected or unprojected."""


class BufferEngineError(GeoBufferError):
    """
    The planar buffer engine rejected or failed on a geometry.

    Attributes:
        geometry: The projected GeoJSON geometry handed to the engine,
                  kept for diagnostics
    """

    def __init__(self, message: str, geometry: Optional[Dict] = None):
        super().__init__(message)
        self.geometry = geometry
