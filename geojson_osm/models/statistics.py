"""Conversion statistics data model."""
from dataclasses import dataclass, asdict
from typing import Dict, Any


@dataclass
class ConversionStats:
    """Counts collected while converting one GeoJSON document."""
    features_read: int = 0
    point_nodes: int = 0
    way_nodes: int = 0
    ways: int = 0
    ways_emitted: int = 0
    skipped_features: int = 0
    oversized_ways: int = 0

    @property
    def nodes(self) -> int:
        """Get the number of nodes written."""
        return self.point_nodes + self.way_nodes

    @property
    def total_elements(self) -> int:
        """Get the number of elements written."""
        return self.nodes + self.ways_emitted

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        data = asdict(self)
        data['nodes'] = self.nodes
        data['total_elements'] = self.total_elements
        return data
