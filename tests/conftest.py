"""Pytest fixtures for geojson2osm tests."""
import json
import pytest
from lxml import etree


def feature(geometry_type, coordinates, properties=None):
    """Build a GeoJSON Feature dict."""
    return {
        "type": "Feature",
        "geometry": {"type": geometry_type, "coordinates": coordinates},
        "properties": properties,
    }


def collection(*features):
    """Build a GeoJSON FeatureCollection dict."""
    return {"type": "FeatureCollection", "features": list(features)}


def parse_osm(document):
    """Parse an OSM XML document into an lxml root element."""
    return etree.fromstring(document)


@pytest.fixture
def sample_collection():
    """FeatureCollection with two points, two crossing roads and a polygon."""
    return collection(
        feature("Point", [7.0, 51.0], {"name": "X", "count": 3, "extra": [1, 2]}),
        feature("LineString", [[7.0, 51.0], [7.1, 51.1], [7.2, 51.2]],
                {"highway": "residential", "name": "Main Street"}),
        feature("LineString", [[7.1, 51.1], [7.3, 51.0]],
                {"highway": "service"}),
        feature("Polygon", [[[0, 0], [1, 0], [1, 1], [0, 0]]], {"building": "yes"}),
        feature("Point", [7.5, 51.5], None),
    )


@pytest.fixture
def sample_geojson_file(tmp_path, sample_collection):
    """Write the sample collection to a .geojson file."""
    file = tmp_path / "sample.geojson"
    file.write_text(json.dumps(sample_collection), encoding="utf-8")
    return file


@pytest.fixture
def malformed_geojson_file(tmp_path):
    """Create a truncated GeoJSON file."""
    file = tmp_path / "broken.geojson"
    file.write_text('{"type": "FeatureCollection", "features": [{"type": "Fea')
    return file


@pytest.fixture
def sample_point():
    """Create sample Point GeoFeature."""
    from geojson_osm.models.features import GeoFeature
    return GeoFeature(
        geometry_type="Point",
        coordinates=(-0.1, 51.5),
        properties={"amenity": "restaurant", "name": "Test Restaurant"},
        index=0
    )


@pytest.fixture
def sample_line():
    """Create sample LineString GeoFeature."""
    from geojson_osm.models.features import GeoFeature
    return GeoFeature(
        geometry_type="LineString",
        coordinates=[(-0.1, 51.5), (-0.11, 51.51), (-0.12, 51.52)],
        properties={"highway": "primary", "name": "Main Street"},
        index=1
    )
