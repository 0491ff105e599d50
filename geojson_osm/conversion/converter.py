"""GeoJSON to OSM conversion engine.

Collects Point and LineString features into OSM nodes and ways in a single
pass. Line vertices with equal coordinates share one node; Point features
always get a node of their own, even when they sit exactly on a line vertex
or on another Point.
"""
import struct
import sys
from typing import Dict, Iterable, Iterator, List, Optional, TextIO, Tuple

from geojson_osm.constants import MAX_WAY_NODES
from geojson_osm.conversion.identifiers import IdAllocator
from geojson_osm.conversion.tags import extract_tags
from geojson_osm.models.elements import Coordinate, OSMNode, OSMWay
from geojson_osm.models.features import GeoFeature, SkippedFeature
from geojson_osm.models.statistics import ConversionStats


class OSMConverter:
    """Holds the state of one conversion.

    All tables are per instance, so separate conversions never share ids
    or nodes. Iteration order of every table is allocation order.
    """

    def __init__(self, max_way_nodes: int = MAX_WAY_NODES,
                 diagnostics: Optional[TextIO] = None):
        """Initialize converter.

        Args:
            max_way_nodes: Ways with more vertices than this are not emitted
            diagnostics: Stream for warnings (default: sys.stderr)
        """
        self.max_way_nodes = max_way_nodes
        self.diagnostics = diagnostics

        self.ids = IdAllocator()
        self.point_nodes: Dict[int, GeoFeature] = {}
        # packed (lon, lat) bits -> (node id, coordinate)
        self.way_nodes: Dict[bytes, Tuple[int, Coordinate]] = {}
        self.ways: Dict[int, GeoFeature] = {}
        self.skipped: List[SkippedFeature] = []
        self._emitted_ways: Optional[List[OSMWay]] = None

        self.stats = ConversionStats()

    def collect(self, features: Iterable[GeoFeature]) -> 'OSMConverter':
        """Add all features to the tables.

        Args:
            features: Features in document order

        Returns:
            Self for method chaining
        """
        for feature in features:
            self.collect_feature(feature)
        return self

    def collect_feature(self, feature: GeoFeature) -> bool:
        """Add one feature to the tables.

        Args:
            feature: Feature to add

        Returns:
            True if the feature was converted, False if it was skipped
        """
        self.stats.features_read += 1

        if feature.is_point:
            self.point_nodes[self.ids.next_id()] = feature
            self.stats.point_nodes += 1
            return True

        if feature.is_line_string:
            self.ways[self.ids.next_id()] = feature
            self.stats.ways += 1
            for point in feature.vertices:
                key = vertex_key(point)
                if key not in self.way_nodes:
                    self.way_nodes[key] = (self.ids.next_id(), point)
                    self.stats.way_nodes += 1
            return True

        geometry_type = feature.geometry_type or 'Feature without geometry'
        self._skip(feature, 'unsupported_geometry', f"{geometry_type} is unsupported")
        return False

    def iter_nodes(self) -> Iterator[OSMNode]:
        """Yield all nodes: tagged Point nodes first, then line vertices."""
        for node_id, feature in self.point_nodes.items():
            yield OSMNode.from_coordinate(node_id, feature.point,
                                          extract_tags(feature.properties))
        for node_id, point in self.way_nodes.values():
            yield OSMNode.from_coordinate(node_id, point)

    def vertex_id(self, point: Coordinate) -> int:
        """Get the node id of a line vertex."""
        return self.way_nodes[vertex_key(point)][0]

    def iter_ways(self) -> Iterator[OSMWay]:
        """Iterate over all ways that fit within the vertex limit.

        The size guard runs on the first call only; oversized ways are
        reported once and left out. Their vertex nodes are still part of
        iter_nodes().
        """
        if self._emitted_ways is None:
            self._emitted_ways = self._guard_ways()
        return iter(self._emitted_ways)

    def _guard_ways(self) -> List[OSMWay]:
        ways = []
        for way_id, feature in self.ways.items():
            vertices = feature.vertices
            if len(vertices) > self.max_way_nodes:
                self.stats.oversized_ways += 1
                self._skip(feature, 'way_too_long',
                           f"Way too long {len(vertices)} nodes")
                continue

            ways.append(OSMWay(
                id=way_id,
                node_refs=[self.vertex_id(p) for p in vertices],
                tags=extract_tags(feature.properties)
            ))
        self.stats.ways_emitted = len(ways)
        return ways

    def _skip(self, feature: GeoFeature, reason: str, message: str) -> None:
        self.skipped.append(SkippedFeature(
            index=feature.index,
            geometry_type=feature.geometry_type,
            reason=reason,
            message=message
        ))
        self.stats.skipped_features += 1
        print(f"geojson2osm: warning: {message} (feature {feature.index} skipped)",
              file=self.diagnostics or sys.stderr)


def vertex_key(point: Coordinate) -> bytes:
    """Dedup key of a vertex: the raw bits of both ordinates.

    0.0 and -0.0 compare equal as floats but are different vertices.
    """
    return struct.pack('<dd', *point)


def convert_features(features: Iterable[GeoFeature],
                     max_way_nodes: int = MAX_WAY_NODES,
                     diagnostics: Optional[TextIO] = None) -> OSMConverter:
    """Collect features into a new converter.

    Args:
        features: Features in document order
        max_way_nodes: Vertex limit for emitted ways
        diagnostics: Stream for warnings (default: sys.stderr)

    Returns:
        Populated OSMConverter
    """
    return OSMConverter(max_way_nodes, diagnostics).collect(features)
