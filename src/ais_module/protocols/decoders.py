"""
Semantic decoders for AIS position report fields.

Each decoder turns a raw field value into display text. Values a
field reserves for "no data" become NOT_AVAILABLE (or a more specific
message), and values outside the field's valid range become ERROR.
Decoders never raise for either case.

AIVDM reference: https://gpsd.gitlab.io/gpsd/AIVDM.html
"""

from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from ..utils.conversions import (
    format_fixed,
    format_with_unit,
    round_half_away,
    to_signed,
)
from . import fields

NOT_AVAILABLE = "not available"
ERROR = "error"

MESSAGE_TYPE_NAMES: Tuple[str, ...] = (
    "Position Report Class A",
    "Position Report Class A (Assigned schedule)",
    "Position Report Class A (Response to interrogation)",
    "Base Station Report",
    "Static and Voyage Related Data",
    "Binary Addressed Message",
    "Binary Acknowledge",
    "Binary Broadcast Message",
    "Standard SAR Aircraft Position Report",
    "UTC and Date Inquiry",
    "UTC and Date Response",
    "Addressed Safety Related Message",
    "Safety Related Acknowledgement",
    "Safety Related Broadcast Message",
    "Interrogation",
    "Assignment Mode Command",
    "DGNSS Binary Broadcast Message",
    "Standard Class B CS Position Report",
    "Extended Class B Equipment Position Report",
    "Data Link Management",
    "Aid-to-Navigation Report",
    "Channel Management",
    "Group Assignment Command",
    "Static Data Report",
    "Single Slot Binary Message",
    "Multiple Slot Binary Message With Communications State",
    "Position Report For Long-Range Applications",
)

NAVIGATION_STATUS_NAMES: Tuple[str, ...] = (
    "Under way using engine",
    "At anchor",
    "Not under command",
    "Restricted manoeuverability",
    "Constrained by her draught",
    "Moored",
    "Aground",
    "Engaged in Fishing",
    "Under way sailing",
    "Reserved",
    "Reserved",
    "Reserved",
    "Reserved",
    "Reserved",
    "AIS-SART is active",
    "Not defined",
)

# Raw values meaning "not available"
ROT_NOT_AVAILABLE = -128
SOG_NOT_AVAILABLE = 1023
LON_NOT_AVAILABLE = 0x6791AC0  # 181 degrees
LAT_NOT_AVAILABLE = 0x3412140  # 91 degrees
COG_NOT_AVAILABLE = 3600
HEADING_NOT_AVAILABLE = 511
TIME_STAMP_NOT_AVAILABLE = 60

ROT_SCALE = 4.773
COORDINATE_SCALE = 600000.0  # 1/10000 minute


def decode_message_type(value: int) -> str:
    """Message type name; valid types are 1-27."""
    if value == 0 or value > len(MESSAGE_TYPE_NAMES):
        return ERROR
    return MESSAGE_TYPE_NAMES[value - 1]


def decode_repeat_indicator(value: int) -> str:
    return str(value)


def decode_mmsi(value: int) -> str:
    return str(value)


def decode_navigation_status(value: int) -> str:
    if value >= len(NAVIGATION_STATUS_NAMES):
        return ERROR
    return NAVIGATION_STATUS_NAMES[value]


def decode_rate_of_turn(value: int) -> str:
    """
    Rate of turn in degrees per minute.

    The raw field is a signed byte holding a scaled square root of
    the turn rate. The sensor value is recovered by squaring
    value / ROT_SCALE, rounding half away from zero, then restoring
    the sign of the raw value.
    """
    rot_ais = to_signed(value, 8)
    if rot_ais == ROT_NOT_AVAILABLE:
        return NOT_AVAILABLE

    rot_sensor = round_half_away((rot_ais / ROT_SCALE) ** 2)
    if rot_ais < 0:
        rot_sensor = -rot_sensor
    return format_with_unit(rot_sensor, "deg/min")


def decode_speed_over_ground(value: int) -> str:
    if value == SOG_NOT_AVAILABLE:
        return NOT_AVAILABLE
    return format_with_unit(format_fixed(value * 0.1), "knots")


def decode_position_accuracy(value: int) -> str:
    if value == 1:
        return "<10m"
    elif value == 0:
        return ">10m"
    return ERROR


def _decode_coordinate(value: int, sign_bit: int, limit: float) -> str:
    magnitude = value & (sign_bit - 1)
    if value & sign_bit:
        signed = magnitude - sign_bit
    else:
        signed = magnitude

    degrees = signed / COORDINATE_SCALE
    if not -limit <= degrees <= limit:
        return ERROR
    return format_with_unit(format_fixed(degrees), "deg")


def decode_longitude(value: int) -> str:
    """Longitude in degrees; 28-bit two's complement, sign at bit 27."""
    if value == LON_NOT_AVAILABLE:
        return NOT_AVAILABLE
    return _decode_coordinate(value, 0x08000000, 180.0)


def decode_latitude(value: int) -> str:
    """Latitude in degrees; 27-bit two's complement, sign at bit 26."""
    if value == LAT_NOT_AVAILABLE:
        return NOT_AVAILABLE
    return _decode_coordinate(value, 0x04000000, 90.0)


def decode_course_over_ground(value: int) -> str:
    if value == COG_NOT_AVAILABLE:
        return NOT_AVAILABLE

    course = value * 0.1
    if course > 360.0:
        return ERROR
    return format_with_unit(format_fixed(course), "deg")


def decode_true_heading(value: int) -> str:
    if value == HEADING_NOT_AVAILABLE:
        return NOT_AVAILABLE
    if value > 359:
        return ERROR
    return format_with_unit(value, "deg")


def decode_time_stamp(value: int) -> str:
    """UTC second of the fix, or the state of the positioning system."""
    if value == TIME_STAMP_NOT_AVAILABLE:
        return NOT_AVAILABLE
    elif value == 61:
        return "system in manual input mode"
    elif value == 62:
        return "system in estimated mode"
    elif value == 63:
        return "system inoperative"
    return format_with_unit(value, "s")


def decode_maneuver_indicator(value: int) -> str:
    if value == 0:
        return NOT_AVAILABLE
    elif value == 1:
        return "no special maneuver"
    elif value == 2:
        return "special maneuver"
    return ERROR


def decode_raim_flag(value: int) -> str:
    if value == 1:
        return "in use"
    elif value == 0:
        return "not in use"
    return ERROR


def decode_radio_status(value: int) -> str:
    return str(value)


FIELD_DECODERS: Mapping[str, Callable[[int], str]] = MappingProxyType(
    {
        fields.MESSAGE_TYPE.name: decode_message_type,
        fields.REPEAT_INDICATOR.name: decode_repeat_indicator,
        fields.MMSI.name: decode_mmsi,
        fields.NAVIGATION_STATUS.name: decode_navigation_status,
        fields.RATE_OF_TURN.name: decode_rate_of_turn,
        fields.SPEED_OVER_GROUND.name: decode_speed_over_ground,
        fields.POSITION_ACCURACY.name: decode_position_accuracy,
        fields.LONGITUDE.name: decode_longitude,
        fields.LATITUDE.name: decode_latitude,
        fields.COURSE_OVER_GROUND.name: decode_course_over_ground,
        fields.TRUE_HEADING.name: decode_true_heading,
        fields.TIME_STAMP.name: decode_time_stamp,
        fields.MANEUVER_INDICATOR.name: decode_maneuver_indicator,
        fields.RAIM_FLAG.name: decode_raim_flag,
        fields.RADIO_STATUS.name: decode_radio_status,
    }
)
