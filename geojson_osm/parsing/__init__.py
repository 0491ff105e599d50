"""GeoJSON parsing."""

from geojson_osm.parsing.geojson_reader import GeoJSONReader, read_geojson

__all__ = ['GeoJSONReader', 'read_geojson']
