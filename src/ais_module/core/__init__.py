"""
Core module - Bit buffers, configuration and log processing.
"""

from .bit_buffer import BitBuffer, DecodeError, FieldBoundsError, extract_field
from .config import ConfigValidationError, DecoderConfig, get_preset, list_presets
from .processor import LogProcessor, ProcessingStats

__all__ = [
    "BitBuffer",
    "DecodeError",
    "FieldBoundsError",
    "extract_field",
    "DecoderConfig",
    "ConfigValidationError",
    "get_preset",
    "list_presets",
    "LogProcessor",
    "ProcessingStats",
]
