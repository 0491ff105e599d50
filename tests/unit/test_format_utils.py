"""Tests for number formatting utilities."""
from decimal import Decimal

import pytest
from geojson_osm.utils.format_utils import format_number


class TestFormatNumber:
    """Tests for format_number function."""

    def test_float_keeps_trailing_zero(self):
        """Test integral floats keep their decimal point."""
        assert format_number(51.0) == "51.0"

    def test_integer(self):
        """Test integers are written without decimal point."""
        assert format_number(3) == "3"

    def test_negative(self):
        """Test negative coordinates."""
        assert format_number(-0.1) == "-0.1"

    def test_full_precision(self):
        """Test no digits are lost."""
        assert format_number(7.123456789012345) == "7.123456789012345"
        assert float(format_number(0.1 + 0.2)) == 0.1 + 0.2

    def test_small_value_not_scientific(self):
        """Test values Python would print with an exponent."""
        assert format_number(1e-05) == "0.00001"
        assert format_number(-2.5e-07) == "-0.00000025"

    def test_large_value_not_scientific(self):
        """Test large floats are written out in full."""
        assert format_number(1e16) == "10000000000000000.0"

    def test_large_integer(self):
        """Test big JSON integers are kept exactly."""
        assert format_number(12345678901234567890) == "12345678901234567890"

    def test_decimal_keeps_digits(self):
        """Test decimals are written with the digits they were read with."""
        assert format_number(Decimal("0.10")) == "0.10"
        assert format_number(Decimal("-7.5")) == "-7.5"

    def test_decimal_exponent_expanded(self):
        assert format_number(Decimal("1E+2")) == "100"
        assert format_number(Decimal("2.5E-7")) == "0.00000025"

    def test_decimal_beyond_float_range(self):
        """Test numbers no float can hold are still written in full."""
        assert format_number(Decimal("1e400")) == "1" + "0" * 400

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
    def test_decimal_non_finite_rejected(self, value):
        with pytest.raises(ValueError):
            format_number(Decimal(value))

    def test_nan_rejected(self):
        """Test NaN cannot be formatted."""
        with pytest.raises(ValueError):
            format_number(float("nan"))

    def test_bool_rejected(self):
        """Test booleans are not treated as numbers."""
        with pytest.raises(TypeError):
            format_number(True)
