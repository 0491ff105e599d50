"""Tests for data models."""
import dataclasses
import pytest
from geojson_osm.models.elements import OSMNode, OSMWay
from geojson_osm.models.features import GeoFeature, SkippedFeature
from geojson_osm.models.statistics import ConversionStats


class TestOSMNode:
    """Tests for OSMNode class."""

    def test_from_coordinate(self):
        """Test GeoJSON (lon, lat) order is mapped to lat/lon."""
        node = OSMNode.from_coordinate(-1, (7.0, 51.0), {"name": "X"})
        assert node.id == -1
        assert node.lat == 51.0
        assert node.lon == 7.0
        assert node.tags == {"name": "X"}

    def test_from_coordinate_without_tags(self):
        node = OSMNode.from_coordinate(-2, (7.0, 51.0))
        assert node.tags == {}


class TestOSMWay:
    """Tests for OSMWay class."""

    def test_creation(self):
        way = OSMWay(id=-1, node_refs=[-2, -3, -2])
        assert way.node_refs == [-2, -3, -2]
        assert way.tags == {}


class TestGeoFeature:
    """Tests for GeoFeature class."""

    def test_point(self, sample_point):
        assert sample_point.is_point
        assert not sample_point.is_line_string
        assert sample_point.point == (-0.1, 51.5)

    def test_line_string(self, sample_line):
        assert sample_line.is_line_string
        assert len(sample_line.vertices) == 3

    def test_point_has_no_vertices(self, sample_point):
        with pytest.raises(TypeError):
            sample_point.vertices

    def test_line_has_no_point(self, sample_line):
        with pytest.raises(TypeError):
            sample_line.point

    def test_immutable(self, sample_point):
        """Test features cannot be changed after reading."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_point.geometry_type = "LineString"

    def test_skipped_feature(self):
        skipped = SkippedFeature(index=3, geometry_type="Polygon",
                                 reason="unsupported_geometry",
                                 message="Polygon is unsupported")
        assert skipped.index == 3
        assert skipped.reason == "unsupported_geometry"


class TestConversionStats:
    """Tests for ConversionStats class."""

    def test_defaults(self):
        stats = ConversionStats()
        assert stats.nodes == 0
        assert stats.total_elements == 0

    def test_totals(self):
        stats = ConversionStats(point_nodes=2, way_nodes=4, ways=2, ways_emitted=1)
        assert stats.nodes == 6
        assert stats.total_elements == 7

    def test_to_dict(self):
        data = ConversionStats(point_nodes=1, ways=1, ways_emitted=1).to_dict()
        assert data["point_nodes"] == 1
        assert data["nodes"] == 1
        assert data["total_elements"] == 2
