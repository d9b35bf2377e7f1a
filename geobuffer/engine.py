"""
Planar Buffer Engine

Offsets a geometry in planar (projected) coordinates. The orchestrator only
depends on the BufferEngine protocol; ShapelyBufferEngine is the default
implementation backed by GEOS through shapely.
"""

from typing import Dict, Protocol

from shapely import make_valid
from shapely.errors import ShapelyError
from shapely.geometry import mapping, shape

from geobuffer.errors import BufferEngineError
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_QUAD_SEGS = 16


class BufferEngine(Protocol):
    """Anything that can offset a planar GeoJSON geometry by a distance."""

    def offset(self, geometry: Dict, distance: float, quad_segs: int = DEFAULT_QUAD_SEGS) -> Dict:
        ...


class ShapelyBufferEngine:
    """
    Buffer planar GeoJSON geometries with shapely.

    Args:
        cap_style: 'round', 'flat' or 'square'
        join_style: 'round', 'mitre' or 'bevel'
        mitre_limit: Limit for mitre joins
        auto_repair_invalid: Run make_valid() on invalid input before buffering
    """

    def __init__(self,
                 cap_style: str = 'round',
                 join_style: str = 'round',
                 mitre_limit: float = 5.0,
                 auto_repair_invalid: bool = True):
        self.cap_style = cap_style
        self.join_style = join_style
        self.mitre_limit = mitre_limit
        self.auto_repair_invalid = auto_repair_invalid

    def offset(self, geometry: Dict, distance: float, quad_segs: int = DEFAULT_QUAD_SEGS) -> Dict:
        """
        Buffer a planar geometry.

        Args:
            geometry: GeoJSON geometry in projected meters
            distance: Buffer distance in meters
            quad_segs: Segments used to approximate a quarter circle

        Returns:
            GeoJSON Polygon or MultiPolygon in projected meters

        Raises:
            BufferEngineError: If the geometry cannot be read or buffered
        """
        try:
            geom = shape(geometry)
        except (ShapelyError, ValueError, TypeError, IndexError, KeyError, AttributeError) as e:
            raise BufferEngineError(f"Cannot read geometry for buffering: {e}", geometry) from e

        if geom.is_empty:
            raise BufferEngineError(f"Cannot buffer empty {geom.geom_type}", geometry)

        if not geom.is_valid:
            if not self.auto_repair_invalid:
                raise BufferEngineError(f"Invalid {geom.geom_type} geometry", geometry)
            logger.warning(f"Invalid geometry detected: {geom.geom_type}, repairing with make_valid()")
            geom = make_valid(geom)

        try:
            buffered = geom.buffer(
                distance,
                quad_segs=quad_segs,
                cap_style=self.cap_style,
                join_style=self.join_style,
                mitre_limit=self.mitre_limit
            )
        except (ShapelyError, ValueError) as e:
            raise BufferEngineError(f"Buffer operation failed: {e}", geometry) from e

        if buffered.is_empty:
            raise BufferEngineError(f"Buffer of {geom.geom_type} produced an empty geometry", geometry)

        logger.debug(f"  - Buffered geometry type: {buffered.geom_type}")

        return mapping(buffered)
