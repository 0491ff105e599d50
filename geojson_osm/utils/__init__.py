"""Utility functions for GeoJSON to OSM conversion."""

from geojson_osm.utils.format_utils import format_number

__all__ = ['format_number']
