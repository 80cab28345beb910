"""
AIS message decoding - Payload armoring, field layout and field interpretation.
"""

from .armor import (
    ArmorMode,
    InvalidCharacterError,
    InvalidSixBitValueError,
    armor_alphabet,
    decode_armor,
    encode_armor,
)
from .base import DecodedField, DecodedReport, ProtocolDecoder, ProtocolInfo
from .decoders import ERROR, FIELD_DECODERS, NOT_AVAILABLE
from .fields import (
    POSITION_REPORT_BITS,
    POSITION_REPORT_FIELDS,
    FieldDescriptor,
    extract_message_type,
    extract_mmsi,
)
from .position_report import PositionReportDecoder, format_record

__all__ = [
    # Armor
    "ArmorMode",
    "InvalidCharacterError",
    "InvalidSixBitValueError",
    "armor_alphabet",
    "decode_armor",
    "encode_armor",
    # Framework
    "ProtocolDecoder",
    "ProtocolInfo",
    "DecodedField",
    "DecodedReport",
    # Fields
    "FieldDescriptor",
    "POSITION_REPORT_FIELDS",
    "POSITION_REPORT_BITS",
    "extract_message_type",
    "extract_mmsi",
    "FIELD_DECODERS",
    "NOT_AVAILABLE",
    "ERROR",
    # Position reports
    "PositionReportDecoder",
    "format_record",
]
