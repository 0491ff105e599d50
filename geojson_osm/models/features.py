"""GeoJSON feature data models."""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from geojson_osm.constants import POINT, LINESTRING
from geojson_osm.models.elements import Coordinate


@dataclass(frozen=True)
class GeoFeature:
    """A GeoJSON Feature as read from the input document.

    For Point geometries ``coordinates`` is a (lon, lat) tuple, for
    LineString geometries a list of them. Other geometry types keep the
    raw JSON value since they are never converted.
    """
    geometry_type: Optional[str]
    coordinates: Any = None
    properties: Optional[Dict[str, Any]] = None
    index: int = 0

    @property
    def is_point(self) -> bool:
        return self.geometry_type == POINT

    @property
    def is_line_string(self) -> bool:
        return self.geometry_type == LINESTRING

    @property
    def point(self) -> Coordinate:
        """Location of a Point feature."""
        if not self.is_point:
            raise TypeError(f"{self.geometry_type} feature has no single point")
        return self.coordinates

    @property
    def vertices(self) -> List[Coordinate]:
        """Vertices of a LineString feature, in source order."""
        if not self.is_line_string:
            raise TypeError(f"{self.geometry_type} feature has no vertices")
        return self.coordinates


@dataclass(frozen=True)
class SkippedFeature:
    """A feature that contributed nothing to the output."""
    index: int
    geometry_type: Optional[str]
    reason: str  # 'unsupported_geometry' or 'way_too_long'
    message: str
