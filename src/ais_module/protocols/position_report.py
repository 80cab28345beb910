"""
Class A position report decoder (message types 1, 2 and 3).
"""

import logging
from typing import Iterable, Tuple

from ..core.bit_buffer import BitBuffer, FieldBoundsError
from .armor import ArmorMode
from .base import DecodedField, DecodedReport, ProtocolDecoder, ProtocolInfo
from .decoders import FIELD_DECODERS
from .fields import (
    MMSI,
    POSITION_REPORT_BITS,
    POSITION_REPORT_FIELDS,
    extract,
    extract_message_type,
)

logger = logging.getLogger(__name__)

POSITION_REPORT_TYPES: Tuple[int, ...] = (1, 2, 3)

# Output label for each field, in field table order
RECORD_LABELS: Tuple[Tuple[str, str], ...] = (
    ("Message Type", "Message type"),
    ("Repeat Indicator", "Count"),
    ("MMSI", "MMSI"),
    ("Navigation Status", "Status"),
    ("Rate Of Turn", "ROT"),
    ("Speed Over Ground", "SOG"),
    ("Position Accuracy", "Accuracy"),
    ("Longitude", "LON"),
    ("Latitude", "LAT"),
    ("Course Over Ground", "COG"),
    ("True Heading", "HDG"),
    ("Time Stamp", "Timestamp"),
    ("Maneuver Indicator", "Maneuver"),
    ("RAIM Flag", "RAIM"),
    ("Radio Status", "Radio"),
)


def format_record(report: DecodedReport) -> str:
    """
    Render a report as a labelled multi-line record.

    The first line carries the message type; each following field is
    on its own tab-indented line.

    Args:
        report: Decoded report

    Returns:
        Record text ending with a newline
    """
    values = report.as_dict()
    lines = []
    for i, (name, label) in enumerate(RECORD_LABELS):
        if name not in values:
            continue
        prefix = "" if i == 0 else "\t"
        lines.append(f"{prefix}{label}: {values[name]}")
    return "\n".join(lines) + "\n"


class PositionReportDecoder(ProtocolDecoder):
    """
    Decoder for AIS Class A position reports.

    Every field is always decoded; unusable raw values show up as
    "not available" or "error" in the report rather than failing
    the decode.
    """

    def __init__(
        self,
        mode: ArmorMode = ArmorMode.REFERENCE,
        message_types: Iterable[int] = POSITION_REPORT_TYPES,
    ):
        """
        Initialize decoder.

        Args:
            mode: Armor table used to de-armor payloads
            message_types: Message types accepted by can_decode()
        """
        super().__init__(mode)
        self._message_types = tuple(message_types)
        for message_type in self._message_types:
            if message_type not in POSITION_REPORT_TYPES:
                raise ValueError(
                    f"Message type {message_type} is not a position report type"
                )

    @property
    def message_types(self) -> Tuple[int, ...]:
        """Accepted message types."""
        return self._message_types

    @property
    def protocol_info(self) -> ProtocolInfo:
        if self._info is None:
            self._info = ProtocolInfo(
                name="AIS Position Report Class A",
                message_types=self._message_types,
                min_bits=POSITION_REPORT_BITS,
                description="AIVDM message types 1, 2 and 3",
            )
        return self._info

    def can_decode(self, buffer: BitBuffer) -> bool:
        """Check the 6-bit message type against the accepted types."""
        return extract_message_type(buffer) in self._message_types

    def decode_buffer(self, buffer: BitBuffer) -> DecodedReport:
        """
        Decode all position report fields.

        Args:
            buffer: Payload bit buffer

        Returns:
            Report with one DecodedField per field table entry

        Raises:
            FieldBoundsError: If the buffer is shorter than a position report
        """
        if buffer.bit_length < POSITION_REPORT_BITS:
            raise FieldBoundsError(0, POSITION_REPORT_BITS, buffer.bit_length)

        report = DecodedReport(
            protocol=self.protocol_info.name,
            message_type=extract_message_type(buffer),
        )
        for descriptor in POSITION_REPORT_FIELDS:
            raw = extract(buffer, descriptor)
            value = FIELD_DECODERS[descriptor.name](raw)
            report.fields.append(DecodedField(descriptor.name, raw, value))

        logger.debug(
            f"Decoded type {report.message_type} report from MMSI "
            f"{report[MMSI.name].value}"
        )
        return report
