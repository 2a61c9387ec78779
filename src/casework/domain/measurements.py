"""Conversion between fractional inch text and decimal inches.

Shop drawings are written in fractions ("36 3/8") while every calculation
runs on floats. These helpers convert in both directions, down to 1/32".
"""

from __future__ import annotations

import math
import re

from .value_objects import MeasurementFormat

__all__ = ["decimal_to_fraction", "format_measurement", "parse_fraction"]

_MIXED = re.compile(r"^(\d+)\s+(\d+)\s*/\s*(\d+)$")
_SIMPLE = re.compile(r"^(\d+)\s*/\s*(\d+)$")
_LEADING_NUMBER = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)")

RESOLUTION = 32


def _ratio(numerator: str, denominator: str) -> float:
    den = int(denominator)
    if den == 0:
        return 0.0
    return int(numerator) / den


def _parse_text(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        pass

    mixed = _MIXED.match(text)
    if mixed:
        return int(mixed.group(1)) + _ratio(mixed.group(2), mixed.group(3))

    simple = _SIMPLE.match(text)
    if simple:
        return _ratio(simple.group(1), simple.group(2))

    # Same leniency as a leading-number parse: "12in" reads as 12.
    leading = _LEADING_NUMBER.match(text)
    if leading:
        return float(leading.group(0))
    return 0.0


def parse_fraction(value: str | float | int | None) -> float:
    """Convert measurement input to decimal inches.

    Accepts a number, a decimal string, a simple fraction ("3/4") or a
    mixed number ("1 1/2"), optionally followed by an inch mark. Empty,
    unparseable or out-of-range input yields 0; this function never raises.

    Examples:
        >>> parse_fraction('1 1/2"')
        1.5
        >>> parse_fraction("3/4")
        0.75
        >>> parse_fraction("abc")
        0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            text = str(value).replace('"', "").strip()
            number = _parse_text(text) if text else 0.0
    except (OverflowError, ValueError):
        # Past float range, or an integer over the interpreter's digit limit.
        return 0.0
    return number if math.isfinite(number) else 0.0


def decimal_to_fraction(value: float) -> str:
    """Render decimal inches as a fraction reduced to lowest terms.

    The remainder is rounded to the nearest 1/32".

    Examples:
        >>> decimal_to_fraction(2.375)
        '2 3/8"'
        >>> decimal_to_fraction(0.75)
        '3/4"'
        >>> decimal_to_fraction(5)
        '5"'
    """
    whole = math.floor(value)
    numerator = round((value - whole) * RESOLUTION)
    if numerator == RESOLUTION:
        whole += 1
        numerator = 0

    if numerator == 0:
        return f'{whole}"' if whole > 0 else '0"'

    divisor = math.gcd(numerator, RESOLUTION)
    numerator //= divisor
    denominator = RESOLUTION // divisor

    if whole > 0:
        return f'{whole} {numerator}/{denominator}"'
    return f'{numerator}/{denominator}"'


def format_measurement(
    value: float, mode: MeasurementFormat | str = MeasurementFormat.BOTH
) -> str:
    """Format a measurement for display.

    Args:
        value: Decimal inches.
        mode: ``both`` renders ``1 1/2" (1.500")``; ``fraction`` and
            ``decimal`` render only one form.
    """
    if value <= 0:
        return '0"'
    mode = MeasurementFormat(mode)
    decimal_text = f'{value:.3f}"'
    if mode is MeasurementFormat.FRACTION:
        return decimal_to_fraction(value)
    if mode is MeasurementFormat.DECIMAL:
        return decimal_text
    return f"{decimal_to_fraction(value)} ({decimal_text})"
