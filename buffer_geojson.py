#!/usr/bin/env python
"""
GeoJSON Buffer Tool
===================
Buffers the features of a geospatial file by a radius in real-world units and
writes the buffered polygons as GeoJSON.

Points become geodesic circles; lines and polygons are buffered in a local
transverse Mercator projection centered on each feature.
"""

import argparse
import time
from pathlib import Path
from typing import Optional

# Import logging first
from utils.logger import setup_logging, get_logger

from config.config_loader import OUTPUT_DIR, load_config, load_buffer_settings
from geobuffer.buffer import buffer
from geobuffer.engine import ShapelyBufferEngine
from geobuffer.load_input import load_geojson, write_geojson


def main(input_file: str,
         radius: float,
         units: Optional[str] = None,
         steps: Optional[int] = None,
         output_file: Optional[str] = None,
         log_dir: Optional[Path] = None) -> Optional[Path]:
    """
    Buffer an input file and write the result as GeoJSON.

    Workflow Steps:
    1. Setup logging to console and file
    2. Load buffer settings
    3. Read input features
    4. Buffer every feature
    5. Write output GeoJSON

    Parameters:
    -----------
    input_file : str
        Path to input file (.geojson, .shp, .gpkg, .kml, zipped shapefile, ...)
    radius : float
        Buffer radius
    units : Optional[str]
        Unit of radius, defaults to the configured units
    steps : Optional[int]
        Vertices per full circle, defaults to the configured steps
    output_file : Optional[str]
        Output path, defaults to OUTPUT_DIR/<input>_buffer_<timestamp>.geojson
    log_dir : Optional[Path]
        Directory for the log file

    Returns:
    --------
    Optional[Path]
        Path to output file if successful, None if failed

    Example:
        >>> output_path = main('route.geojson', 2, units='miles')
    """
    workflow_start_time = time.time()

    log_file = setup_logging(log_dir)
    logger = get_logger(__name__)

    logger.info("=" * 80)
    logger.info("GEOJSON BUFFER TOOL")
    logger.info("=" * 80)
    logger.info(f"Log file: {log_file}")
    logger.info("")

    try:
        settings = load_buffer_settings(load_config())
        if units is None:
            units = settings['units']
        if steps is None:
            steps = settings['steps']

        geojson = load_geojson(input_file)

        engine = ShapelyBufferEngine(
            cap_style=settings['cap_style'],
            join_style=settings['join_style'],
            mitre_limit=settings['mitre_limit'],
            auto_repair_invalid=settings['auto_repair_invalid']
        )

        logger.info(f"Buffering by {radius} {units} ({steps} steps)...")
        buffered = buffer(
            geojson, radius, units, steps,
            engine=engine,
            max_workers=settings['max_workers'],
            earth_radius=settings['earth_radius_meters'],
            distortion_warning_km=settings['distortion_warning_km']
        )

        if output_file is None:
            timestamp = time.strftime("%Y%m%d_%H%M%S")
            output_file = OUTPUT_DIR / f"{Path(input_file).stem}_buffer_{timestamp}.geojson"

        output_path = write_geojson(buffered, output_file)

        elapsed_time = time.time() - workflow_start_time
        logger.info("")
        logger.info("✓ BUFFER COMPLETE")
        logger.info(f"✓ Total execution time: {elapsed_time:.2f} seconds")
        logger.info(f"✓ Output file: {output_path}")
        logger.info("")

        return output_path

    except Exception as e:
        elapsed_time = time.time() - workflow_start_time

        logger.error("")
        logger.error("=" * 80)
        logger.error("✗ BUFFER FAILED")
        logger.error("=" * 80)
        logger.error(f"Error: {str(e)}", exc_info=True)
        logger.error(f"Failed after {elapsed_time:.2f} seconds")
        logger.error(f"See log file for details: {log_file}")
        logger.error("=" * 80)
        return None


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Buffer GeoJSON features by a radius.")
    parser.add_argument("input", help="Input GeoJSON/GeoPackage/Shapefile/KML path")
    parser.add_argument("radius", type=float, help="Buffer radius (> 0)")
    parser.add_argument("--units", default=None, help="Radius units (default from config: kilometers)")
    parser.add_argument("--steps", type=int, default=None, help="Vertices per full circle (default 64)")
    parser.add_argument("--output", default=None, help="Output GeoJSON path")
    return parser.parse_args(argv)


def cli(argv=None) -> int:
    args = parse_args(argv)
    output = main(args.input, args.radius, args.units, args.steps, args.output)

    if output:
        print(f"\n✓ Success! Buffered features written to {output}")
        return 0

    print("\n✗ Buffering failed. Check log file for details.")
    return 1


if __name__ == "__main__":
    raise SystemExit(cli())
