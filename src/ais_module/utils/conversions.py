"""
Numeric conversion utilities for AIS field decoding.
"""

import math
from typing import Union

# Type alias for numeric types
Numeric = Union[float, int]


def to_signed(value: int, bits: int) -> int:
    """
    Interpret the low bits of a value as a two's-complement integer.

    Args:
        value: Unsigned raw value
        bits: Field width in bits

    Returns:
        Signed integer in range [-2**(bits-1), 2**(bits-1) - 1]
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")

    mask = (1 << bits) - 1
    sign_bit = 1 << (bits - 1)
    value &= mask
    if value & sign_bit:
        return value - (1 << bits)
    return value


def round_half_away(x: Numeric) -> int:
    """
    Round to nearest integer, halves away from zero.

    Python's round() uses banker's rounding; AIS rate-of-turn values
    are specified with C round() semantics.

    Args:
        x: Value to round

    Returns:
        Rounded integer
    """
    magnitude = abs(x)
    whole = math.floor(magnitude)
    # magnitude - whole is exact, unlike magnitude + 0.5
    if magnitude - whole >= 0.5:
        whole += 1
    return int(whole) if x >= 0 else -int(whole)


def format_fixed(x: Numeric) -> str:
    """
    Render a number with six decimal places.

    Args:
        x: Value to format

    Returns:
        Formatted string (e.g., "12.300000")
    """
    return f"{float(x):f}"


def format_with_unit(value: Union[Numeric, str], unit: str) -> str:
    """
    Append a bracketed unit suffix.

    Args:
        value: Already formatted value or number
        unit: Unit label (e.g., "knots")

    Returns:
        String such as "12.300000 [knots]"
    """
    return f"{value} [{unit}]"
