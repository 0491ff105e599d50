"""Conversion of GeoJSON features into OSM elements."""

from geojson_osm.conversion.identifiers import IdAllocator
from geojson_osm.conversion.tags import extract_tags, tag_value
from geojson_osm.conversion.converter import OSMConverter, convert_features

__all__ = ['IdAllocator', 'extract_tags', 'tag_value', 'OSMConverter',
           'convert_features']
