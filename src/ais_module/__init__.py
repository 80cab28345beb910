"""
AIS Module - AIVDM Position Report Decoder

Decodes Class A position reports (AIS message types 1, 2 and 3) from
collected AIVDM logs. Payloads are de-armored from their 6-bit ASCII
encoding into a bit buffer, fixed bit fields are extracted, and each
field is rendered as unit-annotated text.

Components:
    - Armor decoding: ASCII payload -> 6-bit units
    - Bit buffer: MSB-first field extraction at arbitrary offsets
    - Field decoders: sentinel, sign and range handling per field
    - Log processing: per-sender output files

Unusable field values never abort a decode; they are rendered as
"not available" or "error". Structurally invalid payloads raise
DecodeError.
"""

__version__ = "0.1.0"
__author__ = "AIS Module Team"

from .core.bit_buffer import BitBuffer, DecodeError, FieldBoundsError, extract_field
from .core.config import DecoderConfig
from .core.processor import LogProcessor, ProcessingStats
from .protocols import (
    ArmorMode,
    DecodedReport,
    InvalidCharacterError,
    PositionReportDecoder,
    decode_armor,
    encode_armor,
    format_record,
)

__all__ = [
    # Core
    "BitBuffer",
    "extract_field",
    "DecodeError",
    "FieldBoundsError",
    "DecoderConfig",
    "LogProcessor",
    "ProcessingStats",
    # Protocols
    "ArmorMode",
    "InvalidCharacterError",
    "decode_armor",
    "encode_armor",
    "PositionReportDecoder",
    "DecodedReport",
    "format_record",
    # Version
    "__version__",
]
