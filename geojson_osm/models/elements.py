"""OSM Element data models."""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

# (lon, lat), GeoJSON axis order
Coordinate = Tuple[float, float]


@dataclass
class OSMNode:
    """OSM Node with location and tags.

    Represents a point in the generated OpenStreetMap document. Ids are
    negative because the elements do not exist on the server yet.
    """
    id: int
    lat: float
    lon: float
    tags: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_coordinate(cls, node_id: int, coordinate: Coordinate,
                        tags: Optional[Dict[str, str]] = None) -> 'OSMNode':
        """Create a node from a GeoJSON (lon, lat) pair.

        Args:
            node_id: Allocated OSM id
            coordinate: (lon, lat) tuple
            tags: Optional tags

        Returns:
            OSMNode at the coordinate
        """
        lon, lat = coordinate
        return cls(id=node_id, lat=lat, lon=lon, tags=dict(tags or {}))


@dataclass
class OSMWay:
    """OSM Way with node references and tags.

    Node references keep the vertex order of the source line, repeats
    included.
    """
    id: int
    node_refs: List[int] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)
