"""Unit tests for measurement parsing and display."""

import pytest

from casework.domain import MeasurementFormat
from casework.domain.measurements import (
    decimal_to_fraction,
    format_measurement,
    parse_fraction,
)


class TestParseFraction:
    """Tests for parse_fraction."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3/4", 0.75),
            ("1 1/2", 1.5),
            ('1 1/2"', 1.5),
            ("36 3/8", 36.375),
            ("2.375", 2.375),
            ("  24 ", 24.0),
            ("12in", 12.0),
        ],
    )
    def test_parses_measurement_text(self, text: str, expected: float) -> None:
        """Fractions, mixed numbers and decimals all parse to inches."""
        assert parse_fraction(text) == pytest.approx(expected)

    def test_numbers_pass_through(self) -> None:
        """Numeric input is returned as a float."""
        assert parse_fraction(24) == 24.0
        assert parse_fraction(0.75) == 0.75

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "abc",
            "1/0",
            "inf",
            float("nan"),
            float("inf"),
            True,
            "1" + "0" * 400 + "/1",
            "5" * 5000 + "/2",
            "3 " + "7" * 5000 + "/8",
            10**400,
        ],
    )
    def test_unparseable_input_is_zero(self, value: object) -> None:
        """Garbage never raises; it reads as zero."""
        assert parse_fraction(value) == 0.0


class TestDecimalToFraction:
    """Tests for decimal_to_fraction."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.375, '2 3/8"'),
            (0.75, '3/4"'),
            (5, '5"'),
            (0.5, '1/2"'),
            (22.5, '22 1/2"'),
            (1 / 32, '1/32"'),
        ],
    )
    def test_reduces_to_lowest_terms(self, value: float, expected: str) -> None:
        assert decimal_to_fraction(value) == expected

    def test_rounds_up_into_next_inch(self) -> None:
        """A remainder that rounds to 32/32 carries into the whole inches."""
        assert decimal_to_fraction(0.99) == '1"'
        assert decimal_to_fraction(11.999) == '12"'

    def test_zero(self) -> None:
        assert decimal_to_fraction(0) == '0"'

    def test_parse_of_display_is_close(self) -> None:
        """Displayed fractions parse back within 1/64 of the input."""
        for value in (0.3, 7.77, 13.1875, 29.95):
            shown = decimal_to_fraction(value)
            assert abs(parse_fraction(shown) - value) <= 1 / 64


class TestFormatMeasurement:
    """Tests for format_measurement display modes."""

    def test_both_is_default(self) -> None:
        assert format_measurement(1.5) == '1 1/2" (1.500")'

    def test_fraction_mode(self) -> None:
        assert format_measurement(1.5, MeasurementFormat.FRACTION) == '1 1/2"'

    def test_decimal_mode(self) -> None:
        assert format_measurement(1.5, "decimal") == '1.500"'

    def test_non_positive_values(self) -> None:
        """Zero and negative values display as zero inches."""
        assert format_measurement(0) == '0"'
        assert format_measurement(-3) == '0"'
