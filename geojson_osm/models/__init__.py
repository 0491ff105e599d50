"""Data models for GeoJSON features and OSM elements."""

from geojson_osm.models.elements import Coordinate, OSMNode, OSMWay
from geojson_osm.models.features import GeoFeature, SkippedFeature
from geojson_osm.models.statistics import ConversionStats

__all__ = ['Coordinate', 'OSMNode', 'OSMWay', 'GeoFeature', 'SkippedFeature',
           'ConversionStats']
