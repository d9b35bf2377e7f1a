"""
Geometry Input Loading Module

Reads GeoJSON directly, and any other geospatial format through GeoPandas,
returning plain GeoJSON mappings ready for buffering.
"""

import json
import tempfile
import zipfile
from pathlib import Path
from typing import Dict, Union

import geopandas as gpd
from pyproj import CRS

from utils.logger import get_logger

logger = get_logger(__name__)

GEOJSON_SUFFIXES = {'.geojson', '.json'}


def _read_geodataframe(file_path: Path) -> gpd.GeoDataFrame:
    # ZIP archives are expected to hold a shapefile
    if file_path.suffix.lower() == '.zip':
        logger.info("  - Detected ZIP file, extracting to read shapefile...")
        with tempfile.TemporaryDirectory() as tmpdir:
            with zipfile.ZipFile(file_path, 'r') as zip_ref:
                zip_ref.extractall(tmpdir)
            shp_files = list(Path(tmpdir).rglob('*.shp'))
            if not shp_files:
                raise ValueError("No shapefile (.shp) found in ZIP archive")
            if len(shp_files) > 1:
                logger.warning(f"  - Multiple shapefiles found in ZIP, using first: {shp_files[0].name}")
            return gpd.read_file(shp_files[0])

    return gpd.read_file(file_path)


def load_geojson(file_path: Union[str, Path]) -> Dict:
    """
    Load a geospatial file as a GeoJSON mapping in lon/lat.

    GeoJSON files are parsed as-is, so bare geometries, Features and
    GeometryCollections keep their shape. Other formats (Shapefile,
    GeoPackage, KML, zipped Shapefile, ...) are read with GeoPandas,
    reprojected to EPSG:4326 and returned as a FeatureCollection.

    Args:
        file_path: Path to the input file

    Returns:
        GeoJSON mapping

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be read, is empty or has no CRS
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Input file not found: {file_path}")

    logger.info(f"Loading geometry from: {file_path}")

    if file_path.suffix.lower() in GEOJSON_SUFFIXES:
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                geojson = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid GeoJSON file: {e}")
        if not isinstance(geojson, dict) or 'type' not in geojson:
            raise ValueError("GeoJSON file has no top-level 'type'")
        logger.info(f"  - Loaded GeoJSON {geojson['type']}")
        return geojson

    try:
        gdf = _read_geodataframe(file_path)
    except zipfile.BadZipFile:
        raise ValueError("Invalid ZIP file - file appears to be corrupted")
    except ValueError:
        raise
    except Exception as e:
        raise ValueError(f"Failed to read geospatial file: {e}")

    if gdf.empty:
        raise ValueError("Input file contains no features")

    if gdf.crs is None:
        raise ValueError(
            "Input file has no Coordinate Reference System (CRS) defined. "
            "Please assign a CRS to your data before buffering it."
        )

    logger.info(f"  - Loaded {len(gdf)} feature(s)")
    logger.info(f"  - Original CRS: {gdf.crs}")

    if gdf.crs != CRS.from_epsg(4326):
        logger.info(f"  - Converting from {gdf.crs} to EPSG:4326...")
        gdf = gdf.to_crs('EPSG:4326')

    return json.loads(gdf.to_json())


def write_geojson(geojson: Dict, file_path: Union[str, Path]) -> Path:
    """
    Write a GeoJSON mapping to disk as UTF-8 JSON.

    Returns:
        Path of the written file
    """
    file_path = Path(file_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, 'w', encoding='utf-8') as f:
        json.dump(geojson, f)

    logger.info(f"  ✓ Wrote {geojson.get('type')} to {file_path}")
    return file_path
