"""Tag extraction from GeoJSON properties."""
from decimal import Decimal
from typing import Any, Dict, Optional

from geojson_osm.utils.format_utils import format_number


def tag_value(value: Any) -> Optional[str]:
    """Convert a property value to an OSM tag value.

    Args:
        value: JSON value of a GeoJSON property

    Returns:
        Tag value string, or None for null, arrays and objects
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, (int, float, Decimal)):
        return format_number(value)
    return None


def extract_tags(properties: Optional[Dict[str, Any]]) -> Dict[str, str]:
    """Build OSM tags from GeoJSON feature properties.

    Only scalar values (string, number, boolean) are kept; null values,
    arrays and objects are dropped. Property order is preserved.

    Args:
        properties: Feature properties, possibly None

    Returns:
        Dict mapping tag keys to tag values
    """
    tags = {}
    if not properties:
        return tags

    for key, value in properties.items():
        v = tag_value(value)
        if v is not None:
            tags[key] = v
    return tags
