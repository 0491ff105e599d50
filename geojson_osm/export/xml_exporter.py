"""OSM XML export functionality."""
import io
from typing import BinaryIO, Dict

from lxml import etree

from geojson_osm.constants import (
    GENERATOR, OSM_VERSION, OSM_ELEMENT, NODE_ELEMENT, WAY_ELEMENT,
    TAG_ELEMENT, ND_ELEMENT, UPLOAD_TRUE, UPLOAD_NEVER
)
from geojson_osm.conversion.converter import OSMConverter
from geojson_osm.exceptions import OutputError
from geojson_osm.models.elements import OSMNode, OSMWay
from geojson_osm.utils.format_utils import format_number


class OSMXMLWriter:
    """Serialize converted elements as an OSM 0.6 document.

    The document is built in memory and only handed to the output stream
    once serialization has finished, so a failure never leaves a truncated
    document behind.
    """

    def __init__(self, upload: bool = False, generator: str = GENERATOR):
        """Initialize writer.

        Args:
            upload: Value of the root upload flag ("true" or "never")
            generator: Producer identifier for the root element
        """
        self.upload = upload
        self.generator = generator

    def get_format_name(self) -> str:
        return 'osm'

    def root_attributes(self) -> Dict[str, str]:
        """Attributes of the <osm> root element."""
        return {
            'generator': self.generator,
            'version': OSM_VERSION,
            'upload': UPLOAD_TRUE if self.upload else UPLOAD_NEVER,
        }

    def to_bytes(self, converter: OSMConverter) -> bytes:
        """Serialize a populated converter.

        Order is Point nodes, line vertex nodes, then ways, so every node
        is written before a way references it.

        Args:
            converter: Converter holding the collected features

        Returns:
            UTF-8 encoded XML document

        Raises:
            OutputError: If a value cannot be written as XML
        """
        buffer = io.BytesIO()
        try:
            with etree.xmlfile(buffer, encoding='UTF-8') as xf:
                xf.write_declaration()
                with xf.element(OSM_ELEMENT, attrib=self.root_attributes()):
                    xf.write('\n')
                    for node in converter.iter_nodes():
                        xf.write(node_element(node), pretty_print=True)
                    for way in converter.iter_ways():
                        xf.write(way_element(way), pretty_print=True)
        except (ValueError, TypeError, etree.LxmlError) as e:
            raise OutputError(f"Output could not be written: {e}") from e
        return buffer.getvalue()

    def write(self, converter: OSMConverter, output: BinaryIO) -> int:
        """Serialize a converter to a binary stream.

        Args:
            converter: Converter holding the collected features
            output: Writable binary stream

        Returns:
            Number of bytes written
        """
        document = self.to_bytes(converter)
        output.write(document)
        output.flush()
        return len(document)


def node_element(node: OSMNode) -> etree._Element:
    """Build a <node> element with its <tag> children."""
    element = etree.Element(NODE_ELEMENT, attrib={
        'id': str(node.id),
        'lat': format_number(node.lat),
        'lon': format_number(node.lon),
    })
    _add_tags(element, node.tags)
    return element


def way_element(way: OSMWay) -> etree._Element:
    """Build a <way> element with its <tag> and <nd> children."""
    element = etree.Element(WAY_ELEMENT, attrib={'id': str(way.id)})
    _add_tags(element, way.tags)
    for ref in way.node_refs:
        etree.SubElement(element, ND_ELEMENT, attrib={'ref': str(ref)})
    return element


def _add_tags(element: etree._Element, tags: Dict[str, str]) -> None:
    for k, v in tags.items():
        etree.SubElement(element, TAG_ELEMENT, attrib={'k': k, 'v': v})
