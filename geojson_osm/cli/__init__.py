"""Command-line interface for geojson2osm.

This module provides the CLI entry point for the geojson2osm command.
It is used by setuptools to create the console script.

Usage:
    # After pip install:
    geojson2osm --help
    geojson2osm -i roads.geojson -o roads.osm
    geojson2osm --upload < points.geojson > points.osm

    # Or via Python:
    python -m geojson_osm
"""

import sys
from typing import Optional

from geojson_osm.cli.main import main as _main, create_parser

__all__ = ['main', 'create_parser']


def main(args: Optional[list] = None) -> int:
    """Entry point for the geojson2osm CLI.

    This function is called by the console script created by setuptools.
    It wraps the actual main function to ensure proper exit code handling.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    try:
        return _main(args) or 0
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"geojson2osm: fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
