"""Exceptions raised for conversions that cannot complete."""


class ConversionError(Exception):
    """Base class for fatal conversion failures."""


class InputError(ConversionError):
    """The GeoJSON input could not be processed."""


class OutputError(ConversionError):
    """The OSM XML document could not be serialized."""
