"""GeoJSON reader.

Turns a GeoJSON document into the flat list of features the converter
consumes. A FeatureCollection is tried first; a document holding a single
Feature is accepted as a fallback.

Non-integer numbers are read as Decimal so property values keep the digits
written in the source; coordinates are converted to floats.
"""
import json
import math
from decimal import Decimal
from typing import Any, List, Optional, Union

from geojson_osm.constants import FEATURE_COLLECTION, FEATURE, POINT, LINESTRING
from geojson_osm.exceptions import InputError
from geojson_osm.models.elements import Coordinate
from geojson_osm.models.features import GeoFeature


def _reject_constant(name: str):
    raise ValueError(f"invalid JSON number: {name}")


class GeoJSONReader:
    """Reads GeoJSON text into GeoFeature objects."""

    def read(self, data: Union[bytes, str]) -> List[GeoFeature]:
        """Parse a GeoJSON document.

        Args:
            data: UTF-8 encoded bytes or already decoded text

        Returns:
            Non-empty list of features in document order

        Raises:
            InputError: If the document is not valid JSON, holds neither a
                FeatureCollection nor a Feature, has no features, or holds
                malformed Point/LineString coordinates
        """
        document = self.load(data)

        features = self.read_feature_collection(document)
        if features is None:
            feature = self.read_feature(document)
            features = [feature] if feature is not None else None

        if not features:
            raise InputError("Input could not be processed")
        return features

    def load(self, data: Union[bytes, str]) -> Any:
        """Decode and parse JSON text.

        Args:
            data: UTF-8 bytes or text

        Returns:
            Parsed JSON value
        """
        if isinstance(data, (bytes, bytearray)):
            try:
                data = bytes(data).decode('utf-8-sig')
            except UnicodeDecodeError as e:
                raise InputError(f"Input could not be processed: {e}") from e

        try:
            return json.loads(data, parse_float=Decimal,
                              parse_constant=_reject_constant)
        except ValueError as e:
            raise InputError(f"Input could not be processed: {e}") from e

    def read_feature_collection(self, document: Any) -> Optional[List[GeoFeature]]:
        """Read a FeatureCollection.

        Args:
            document: Parsed JSON value

        Returns:
            List of features, or None if the document is not a
            FeatureCollection
        """
        if not isinstance(document, dict) or document.get('type') != FEATURE_COLLECTION:
            return None

        members = document.get('features')
        if not isinstance(members, list):
            return None

        features = []
        for index, member in enumerate(members):
            feature = self.read_feature(member, index)
            if feature is None:
                raise InputError(
                    f"Input could not be processed: features[{index}] is not a Feature"
                )
            features.append(feature)
        return features

    def read_feature(self, document: Any, index: int = 0) -> Optional[GeoFeature]:
        """Read a single Feature.

        Args:
            document: Parsed JSON value
            index: Position of the feature in its collection

        Returns:
            GeoFeature, or None if the document is not a Feature
        """
        if not isinstance(document, dict) or document.get('type') != FEATURE:
            return None

        properties = document.get('properties')
        if properties is not None and not isinstance(properties, dict):
            raise InputError(
                f"Input could not be processed: feature {index} properties must be an object"
            )

        geometry = document.get('geometry')
        if geometry is None:
            return GeoFeature(geometry_type=None, properties=properties, index=index)
        if not isinstance(geometry, dict):
            raise InputError(
                f"Input could not be processed: feature {index} geometry must be an object"
            )

        geometry_type = geometry.get('type')
        coordinates = geometry.get('coordinates')
        try:
            if geometry_type == POINT:
                coordinates = _position(coordinates)
            elif geometry_type == LINESTRING:
                if not isinstance(coordinates, list):
                    raise ValueError("LineString coordinates must be an array")
                coordinates = [_position(p) for p in coordinates]
        except ValueError as e:
            raise InputError(
                f"Input could not be processed: feature {index}: {e}"
            ) from e

        return GeoFeature(
            geometry_type=geometry_type,
            coordinates=coordinates,
            properties=properties,
            index=index
        )


def _position(value: Any) -> Coordinate:
    """Convert a GeoJSON position to a (lon, lat) float tuple."""
    if not isinstance(value, list) or len(value) < 2:
        raise ValueError(f"invalid position: {value!r}")
    ordinates = []
    for ordinate in value[:2]:
        if isinstance(ordinate, bool) or not isinstance(ordinate, (int, Decimal)):
            raise ValueError(f"invalid position: {value!r}")
        try:
            ordinate = float(ordinate)
        except OverflowError:
            raise ValueError(f"invalid position: {value!r}") from None
        if not math.isfinite(ordinate):
            raise ValueError(f"invalid position: {value!r}")
        ordinates.append(ordinate)
    return (ordinates[0], ordinates[1])


def read_geojson(data: Union[bytes, str]) -> List[GeoFeature]:
    """Parse a GeoJSON document with a default reader.

    Args:
        data: UTF-8 bytes or text

    Returns:
        List of features
    """
    return GeoJSONReader().read(data)
