#!/usr/bin/env python3
"""
geojson2osm - GeoJSON to OpenStreetMap XML converter

This is the CLI entry point. The implementation is in the geojson_osm package.

Usage:
    geojson2osm -i roads.geojson -o roads.osm
    geojson2osm --upload < points.geojson > points.osm

For more information, run: geojson2osm --help
"""
import sys

# Re-export public API
from geojson_osm import (
    # Version
    __version__,
    # Models
    OSMNode,
    OSMWay,
    GeoFeature,
    ConversionStats,
    # Conversion
    GeoJSONReader,
    OSMConverter,
    OSMXMLWriter,
    # API
    GeoJSONToOSM,
    convert,
)

# Re-export CLI entry point
from geojson_osm.cli import main


def cli_main():
    """CLI entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
