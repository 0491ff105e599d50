"""CLI main entry point."""
import argparse
import sys
from typing import Optional

from geojson_osm import __version__
from geojson_osm.api import GeoJSONToOSM
from geojson_osm.exceptions import ConversionError


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='geojson2osm',
        description='Convert GeoJSON Points and LineStrings to OSM 0.6 XML',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  geojson2osm -i roads.geojson -o roads.osm
  geojson2osm --upload < points.geojson > points.osm
  cat survey.geojson | geojson2osm -v -o survey.osm

Only Point and LineString geometries are converted; other features are
reported on stderr and skipped. Ways with more than 2000 nodes are dropped.
'''
    )

    parser.add_argument('--version', '-V', action='version',
                        version=f'geojson2osm {__version__}')
    parser.add_argument('-i', '--input', metavar='PATH',
                        help='Input GeoJSON file (default: standard input)')
    parser.add_argument('-o', '--output', metavar='PATH',
                        help='Output .osm file (default: standard output)')
    parser.add_argument('-u', '--upload', action='store_true',
                        help='Set the upload flag to true (default: never)')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Print a conversion summary to stderr')

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute a conversion.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    input_stream = None
    output_stream = None
    opened = []

    try:
        if args.input:
            input_stream = open(args.input, 'rb')
            opened.append(input_stream)
        else:
            input_stream = sys.stdin.buffer

        if args.output:
            output_stream = open(args.output, 'wb')
            opened.append(output_stream)
        else:
            output_stream = sys.stdout.buffer

        converter = GeoJSONToOSM(upload=args.upload)
        stats = converter.convert_stream(input_stream, output_stream)

        if args.verbose:
            print(f"geojson2osm: {stats.nodes:,} nodes, {stats.ways_emitted:,} ways, "
                  f"{stats.skipped_features:,} features skipped "
                  f"({converter.processing_time:.3f}s)", file=sys.stderr)
        return 0

    except ConversionError as e:
        print(f"geojson2osm: error: {e}", file=sys.stderr)
        return 1
    except MemoryError:
        print("geojson2osm: error: Input could not be processed: out of memory",
              file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"geojson2osm: error: File not found: {e.filename}", file=sys.stderr)
        return 3
    except PermissionError as e:
        print(f"geojson2osm: error: Permission denied: {e.filename}", file=sys.stderr)
        return 4
    except Exception as e:
        print(f"geojson2osm: error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1
    finally:
        for stream in opened:
            stream.close()


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return run(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
