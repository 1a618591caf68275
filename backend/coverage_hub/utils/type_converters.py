"""
Type converters — form value parsing shared by validation and the estimator.
"""
import math
import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_DECIMAL = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def to_int(value: Any) -> Optional[int]:
    """Parse a form value into an int, truncating like the form's parseInt.

    Accepts ints, floats and strings with a leading integer ("42", "42.9",
    " 7 years"). Returns None when no integer can be read.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        return int(value)
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def to_float(value: Any) -> Optional[float]:
    """Convert value to a finite float, returning None if invalid."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (ValueError, TypeError, OverflowError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def parse_grouped_decimal(value: Any) -> Optional[float]:
    """Parse a thousands-grouped decimal such as "50,000.01".

    Reads the leading number and ignores trailing text ("50,000.01 USD").
    """
    if isinstance(value, str):
        match = _LEADING_DECIMAL.match(value.replace(",", ""))
        value = match.group(0) if match else None
    return to_float(value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))
