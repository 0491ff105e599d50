"""Number formatting utilities - single source of truth."""
import math
from decimal import Decimal
from typing import Union


def format_number(value: Union[int, float, Decimal]) -> str:
    """Format a number as plain, locale-independent decimal text.

    Floats use the shortest representation that round-trips; where Python
    would switch to exponent notation the same digits are written out in
    full instead. Decimals keep their own digits.

    Args:
        value: Integer, float or Decimal to format

    Returns:
        Decimal string without exponent

    Raises:
        ValueError: If value is NaN or infinite

    Examples:
        >>> format_number(51.0)
        '51.0'
        >>> format_number(3)
        '3'
        >>> format_number(1e-05)
        '0.00001'
    """
    if isinstance(value, bool):
        raise TypeError(f"not a number: {value!r}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"not a finite number: {value!r}")
        return format(value, 'f')
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {value!r}")

    text = repr(float(value))
    if 'e' not in text:
        return text

    text = format(Decimal(text), 'f')
    if '.' not in text:
        text += '.0'
    return text
