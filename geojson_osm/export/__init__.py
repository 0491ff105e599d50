"""Export of converted elements as OSM XML."""

from geojson_osm.export.xml_exporter import OSMXMLWriter, node_element, way_element

__all__ = ['OSMXMLWriter', 'node_element', 'way_element']
