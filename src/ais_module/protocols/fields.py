"""
Bit layout of AIS position reports (message types 1, 2 and 3).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from ..core.bit_buffer import BitBuffer

POSITION_REPORT_BITS = 168


@dataclass(frozen=True)
class FieldDescriptor:
    """Location of one parameter in the payload bitstream."""

    name: str
    offset: int  # First bit
    length: int  # Width in bits

    @property
    def end(self) -> int:
        """Index one past the last bit."""
        return self.offset + self.length


MESSAGE_TYPE = FieldDescriptor("Message Type", 0, 6)
REPEAT_INDICATOR = FieldDescriptor("Repeat Indicator", 6, 2)
MMSI = FieldDescriptor("MMSI", 8, 30)
NAVIGATION_STATUS = FieldDescriptor("Navigation Status", 38, 4)
RATE_OF_TURN = FieldDescriptor("Rate Of Turn", 42, 8)
SPEED_OVER_GROUND = FieldDescriptor("Speed Over Ground", 50, 10)
POSITION_ACCURACY = FieldDescriptor("Position Accuracy", 60, 1)
LONGITUDE = FieldDescriptor("Longitude", 61, 28)
LATITUDE = FieldDescriptor("Latitude", 89, 27)
COURSE_OVER_GROUND = FieldDescriptor("Course Over Ground", 116, 12)
TRUE_HEADING = FieldDescriptor("True Heading", 128, 9)
TIME_STAMP = FieldDescriptor("Time Stamp", 137, 6)
MANEUVER_INDICATOR = FieldDescriptor("Maneuver Indicator", 143, 2)
RAIM_FLAG = FieldDescriptor("RAIM Flag", 148, 1)
RADIO_STATUS = FieldDescriptor("Radio Status", 149, 19)

# Bits 145-147 are spare and not decoded
POSITION_REPORT_FIELDS: Tuple[FieldDescriptor, ...] = (
    MESSAGE_TYPE,
    REPEAT_INDICATOR,
    MMSI,
    NAVIGATION_STATUS,
    RATE_OF_TURN,
    SPEED_OVER_GROUND,
    POSITION_ACCURACY,
    LONGITUDE,
    LATITUDE,
    COURSE_OVER_GROUND,
    TRUE_HEADING,
    TIME_STAMP,
    MANEUVER_INDICATOR,
    RAIM_FLAG,
    RADIO_STATUS,
)

FIELDS_BY_NAME: Mapping[str, FieldDescriptor] = MappingProxyType(
    {f.name: f for f in POSITION_REPORT_FIELDS}
)


def extract(buffer: BitBuffer, descriptor: FieldDescriptor) -> int:
    """
    Extract the raw value of a field.

    Args:
        buffer: De-armored payload
        descriptor: Field location

    Returns:
        Unsigned raw value
    """
    return buffer.extract(descriptor.offset, descriptor.length)


def extract_message_type(buffer: BitBuffer) -> int:
    """Extract 'Message Type'. Reads only the first six bits."""
    return extract(buffer, MESSAGE_TYPE)


def extract_repeat_indicator(buffer: BitBuffer) -> int:
    return extract(buffer, REPEAT_INDICATOR)


def extract_mmsi(buffer: BitBuffer) -> int:
    return extract(buffer, MMSI)


def extract_navigation_status(buffer: BitBuffer) -> int:
    return extract(buffer, NAVIGATION_STATUS)


def extract_rate_of_turn(buffer: BitBuffer) -> int:
    return extract(buffer, RATE_OF_TURN)


def extract_speed_over_ground(buffer: BitBuffer) -> int:
    return extract(buffer, SPEED_OVER_GROUND)


def extract_position_accuracy(buffer: BitBuffer) -> int:
    return extract(buffer, POSITION_ACCURACY)


def extract_longitude(buffer: BitBuffer) -> int:
    return extract(buffer, LONGITUDE)


def extract_latitude(buffer: BitBuffer) -> int:
    return extract(buffer, LATITUDE)


def extract_course_over_ground(buffer: BitBuffer) -> int:
    return extract(buffer, COURSE_OVER_GROUND)


def extract_true_heading(buffer: BitBuffer) -> int:
    return extract(buffer, TRUE_HEADING)


def extract_time_stamp(buffer: BitBuffer) -> int:
    return extract(buffer, TIME_STAMP)


def extract_maneuver_indicator(buffer: BitBuffer) -> int:
    return extract(buffer, MANEUVER_INDICATOR)


def extract_raim_flag(buffer: BitBuffer) -> int:
    return extract(buffer, RAIM_FLAG)


def extract_radio_status(buffer: BitBuffer) -> int:
    return extract(buffer, RADIO_STATUS)
