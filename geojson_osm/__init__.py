"""geojson_osm - GeoJSON to OpenStreetMap XML conversion.

Points become tagged OSM nodes, LineStrings become OSM ways whose
vertices are shared between lines that meet at identical coordinates.
All generated elements carry negative ids so they can be uploaded as new
data.
"""

__version__ = "1.0.0"

# Data models
from geojson_osm.models.elements import OSMNode, OSMWay
from geojson_osm.models.features import GeoFeature, SkippedFeature
from geojson_osm.models.statistics import ConversionStats

# Errors
from geojson_osm.exceptions import ConversionError, InputError, OutputError

# Parsing
from geojson_osm.parsing.geojson_reader import GeoJSONReader, read_geojson

# Conversion
from geojson_osm.conversion.converter import OSMConverter, convert_features
from geojson_osm.conversion.tags import extract_tags

# Export
from geojson_osm.export.xml_exporter import OSMXMLWriter

# Main API
from geojson_osm.api import GeoJSONToOSM, convert

__all__ = [
    # Version
    '__version__',
    # Models
    'OSMNode', 'OSMWay', 'GeoFeature', 'SkippedFeature', 'ConversionStats',
    # Errors
    'ConversionError', 'InputError', 'OutputError',
    # Parsing
    'GeoJSONReader', 'read_geojson',
    # Conversion
    'OSMConverter', 'convert_features', 'extract_tags',
    # Export
    'OSMXMLWriter',
    # API
    'GeoJSONToOSM', 'convert',
]
