"""Allow running geojson_osm as a module.

Usage:
    python -m geojson_osm --help
    python -m geojson_osm -i roads.geojson -o roads.osm
    python -m geojson_osm < points.geojson > points.osm
"""

import sys
from geojson_osm.cli import main

if __name__ == "__main__":
    sys.exit(main())
