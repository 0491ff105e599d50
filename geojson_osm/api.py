"""Main geojson2osm API.

Provides the high-level GeoJSONToOSM class that wires reading, conversion
and XML export together.
"""
import time
from pathlib import Path
from typing import BinaryIO, Dict, Any, Optional, TextIO, Union

from geojson_osm.constants import GENERATOR, MAX_WAY_NODES
from geojson_osm.conversion.converter import OSMConverter
from geojson_osm.export.xml_exporter import OSMXMLWriter
from geojson_osm.models.statistics import ConversionStats
from geojson_osm.parsing.geojson_reader import GeoJSONReader


class GeoJSONToOSM:
    """Convert GeoJSON documents to OSM 0.6 XML.

    Every conversion starts from a fresh OSMConverter, so ids and shared
    nodes never carry over between documents.
    """

    def __init__(self, upload: bool = False, generator: str = GENERATOR,
                 max_way_nodes: int = MAX_WAY_NODES,
                 diagnostics: Optional[TextIO] = None):
        """Initialize converter facade.

        Args:
            upload: Set the root upload flag to "true" instead of "never"
            generator: Producer identifier for the root element
            max_way_nodes: Ways with more vertices are dropped
            diagnostics: Stream for warnings (default: sys.stderr)
        """
        self.reader = GeoJSONReader()
        self.writer = OSMXMLWriter(upload=upload, generator=generator)
        self.max_way_nodes = max_way_nodes
        self.diagnostics = diagnostics

        # Result of the most recent conversion
        self.last_converter: Optional[OSMConverter] = None
        self.processing_time = 0.0

    def _convert(self, data: Union[bytes, str]) -> bytes:
        start_time = time.time()
        features = self.reader.read(data)

        converter = OSMConverter(self.max_way_nodes, self.diagnostics)
        converter.collect(features)
        document = self.writer.to_bytes(converter)

        self.last_converter = converter
        self.processing_time = time.time() - start_time
        return document

    @property
    def stats(self) -> ConversionStats:
        """Statistics of the most recent conversion."""
        if self.last_converter is None:
            return ConversionStats()
        return self.last_converter.stats

    def convert_string(self, data: Union[bytes, str]) -> bytes:
        """Convert a GeoJSON document held in memory.

        Args:
            data: GeoJSON as UTF-8 bytes or text

        Returns:
            UTF-8 encoded OSM XML document

        Raises:
            InputError: If the input could not be processed
            OutputError: If the document could not be serialized
        """
        return self._convert(data)

    def convert_stream(self, input_stream: BinaryIO,
                       output_stream: BinaryIO) -> ConversionStats:
        """Convert GeoJSON from one binary stream to another.

        The input is read completely before parsing. Nothing is written to
        the output stream unless the whole document was produced.

        Args:
            input_stream: Readable binary stream with GeoJSON
            output_stream: Writable binary stream for OSM XML

        Returns:
            ConversionStats for this conversion
        """
        document = self._convert(input_stream.read())
        output_stream.write(document)
        output_stream.flush()
        return self.stats

    def convert_file(self, input_path: Union[str, Path],
                     output_path: Union[str, Path]) -> Dict[str, Any]:
        """Convert a GeoJSON file to an OSM XML file.

        Args:
            input_path: GeoJSON file path
            output_path: OSM XML file path

        Returns:
            Result dict with metadata
        """
        input_path = Path(input_path)
        if not input_path.exists():
            raise FileNotFoundError(f"GeoJSON file not found: {input_path}")

        document = self._convert(input_path.read_bytes())
        Path(output_path).write_bytes(document)

        return {
            'metadata': {
                'input_file': str(input_path),
                'output_file': str(output_path),
                'format': self.writer.get_format_name(),
                'processing_time_seconds': self.processing_time,
                'elements': self.stats.to_dict()
            }
        }


def convert(data: Union[bytes, str], upload: bool = False) -> bytes:
    """Convert a GeoJSON document to OSM XML with default settings.

    Args:
        data: GeoJSON as UTF-8 bytes or text
        upload: Set the root upload flag

    Returns:
        UTF-8 encoded OSM XML document
    """
    return GeoJSONToOSM(upload=upload).convert_string(data)
