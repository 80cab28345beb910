"""
Utility functions and helpers.
"""

from .conversions import format_fixed, format_with_unit, round_half_away, to_signed

__all__ = [
    "to_signed",
    "round_half_away",
    "format_fixed",
    "format_with_unit",
]
