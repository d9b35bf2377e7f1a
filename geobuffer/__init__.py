"""
Geodesic Buffering Package

This package buffers GeoJSON geometries by a radius given in real-world units,
producing polygons that enclose every point within that radius of the input.

Modules:
    buffer: Public entry point, dispatches by container and geometry type
    units: Convert radii between units, radians and meters
    projection: Local transverse Mercator projection around a centroid
    coordinates: Apply a pair transform across nested GeoJSON coordinates
    engine: Planar buffer engine protocol and shapely implementation
    circle: Geodesic circle generator for point inputs
    measurement: Centroid finder
    features: GeoJSON Feature / FeatureCollection helpers
    load_input: Read and write GeoJSON and other geospatial files
    errors: Exception hierarchy

Usage:
    from geobuffer import buffer

    buffered = buffer(feature_collection, 2.5, units='miles', steps=32)
"""

from geobuffer.buffer import buffer
from geobuffer.circle import circle
from geobuffer.engine import BufferEngine, ShapelyBufferEngine
from geobuffer.errors import (
    GeoBufferError,
    MissingInputError,
    InvalidRadiusError,
    InvalidStepsError,
    InvalidUnitsError,
    UnsupportedGeometryError,
    ProjectionError,
    BufferEngineError
)
from geobuffer.measurement import centroid
from geobuffer.projection import Projection, define_projection, transverse_mercator

__version__ = '1.0.0'

__all__ = [
    'buffer',
    'circle',
    'centroid',
    'BufferEngine',
    'ShapelyBufferEngine',
    'Projection',
    'define_projection',
    'transverse_mercator',
    'GeoBufferError',
    'MissingInputError',
    'InvalidRadiusError',
    'InvalidStepsError',
    'InvalidUnitsError',
    'UnsupportedGeometryError',
    'ProjectionError',
    'BufferEngineError'
]
