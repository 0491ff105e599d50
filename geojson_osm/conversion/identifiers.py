"""Identifier allocation for new OSM elements."""


class IdAllocator:
    """Hands out negative OSM ids: -1, -2, -3, ...

    Nodes and ways draw from the same allocator, so every id in a
    document is unique regardless of element type.
    """

    def __init__(self):
        self._last_id = 0

    def next_id(self) -> int:
        """Allocate the next id."""
        self._last_id -= 1
        return self._last_id
