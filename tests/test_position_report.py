"""Tests for the Class A position report decoder."""

import pytest

from ais_module.core.bit_buffer import BitBuffer, FieldBoundsError
from ais_module.protocols.armor import ArmorMode, InvalidCharacterError, encode_armor
from ais_module.protocols.base import DecodedReport, ProtocolDecoder
from ais_module.protocols.decoders import NOT_AVAILABLE
from ais_module.protocols.fields import (
    POSITION_REPORT_FIELDS,
    extract_latitude,
    extract_longitude,
    extract_message_type,
    extract_mmsi,
    extract_radio_status,
)
from ais_module.protocols.position_report import PositionReportDecoder, format_record

# Real type 1 report with no 'f' or backtick in the payload
REAL_PAYLOAD = "13u@DR0P00PRD6=PNR2P00000000"


def pack_fields(values):
    """Build a bit buffer from (value, width) pairs, MSB first."""
    bits = []
    for value, width in values:
        bits.extend(int(b) for b in format(value, f"0{width}b"))
    return BitBuffer.from_bits(bits)


def synthetic_report(**overrides):
    """Build a 168-bit position report from field values."""
    values = {
        "Message Type": 1,
        "Repeat Indicator": 0,
        "MMSI": 123456789,
        "Navigation Status": 0,
        "Rate Of Turn": 0,
        "Speed Over Ground": 0,
        "Position Accuracy": 0,
        "Longitude": 0,
        "Latitude": 0,
        "Course Over Ground": 0,
        "True Heading": 0,
        "Time Stamp": 0,
        "Maneuver Indicator": 0,
        "RAIM Flag": 0,
        "Radio Status": 0,
    }
    values.update(overrides)

    pairs = []
    position = 0
    for descriptor in POSITION_REPORT_FIELDS:
        if descriptor.offset > position:
            pairs.append((0, descriptor.offset - position))  # spare bits
        pairs.append((values[descriptor.name], descriptor.length))
        position = descriptor.end
    return pack_fields(pairs)


@pytest.fixture
def decoder():
    """Create position report decoder instance."""
    return PositionReportDecoder()


class TestPositionReportDecoder:
    """Tests for PositionReportDecoder."""

    def test_is_protocol_decoder(self, decoder):
        assert isinstance(decoder, ProtocolDecoder)
        assert decoder.mode == ArmorMode.REFERENCE

    def test_protocol_info(self, decoder):
        info = decoder.protocol_info
        assert info.message_types == (1, 2, 3)
        assert info.min_bits == 168

    def test_rejects_other_message_types(self):
        with pytest.raises(ValueError):
            PositionReportDecoder(message_types=(1, 5))

    def test_can_decode_gate(self, decoder):
        """Test the message type gate reads only the first six bits."""
        for message_type in (1, 2, 3):
            assert decoder.can_decode(BitBuffer([message_type]))
        for message_type in (0, 4, 5, 18, 27):
            assert not decoder.can_decode(BitBuffer([message_type]))

    def test_can_decode_subset(self):
        decoder = PositionReportDecoder(message_types=(1, 3))
        assert decoder.can_decode(BitBuffer([3]))
        assert not decoder.can_decode(BitBuffer([2]))

    def test_synthetic_end_to_end(self, decoder):
        """Test a report built from known field values."""
        report = decoder.decode_buffer(synthetic_report())
        values = report.as_dict()
        assert values["Message Type"] == "Position Report Class A"
        assert values["Repeat Indicator"] == "0"
        assert values["MMSI"] == "123456789"
        assert values["Navigation Status"] == "Under way using engine"
        assert values["Rate Of Turn"] == "0 [deg/min]"
        assert values["Speed Over Ground"] == "0.000000 [knots]"
        assert values["Position Accuracy"] == ">10m"
        assert values["Longitude"] == "0.000000 [deg]"
        assert values["Latitude"] == "0.000000 [deg]"
        assert values["Course Over Ground"] == "0.000000 [deg]"
        assert values["True Heading"] == "0 [deg]"
        assert values["Time Stamp"] == "0 [s]"
        assert values["Maneuver Indicator"] == NOT_AVAILABLE
        assert values["RAIM Flag"] == "not in use"
        assert values["Radio Status"] == "0"

    def test_pairs_follow_field_order(self, decoder):
        report = decoder.decode_buffer(synthetic_report())
        names = [name for name, _ in report.as_pairs()]
        assert names == [f.name for f in POSITION_REPORT_FIELDS]

    def test_raw_values_kept(self, decoder):
        report = decoder.decode_buffer(synthetic_report(MMSI=987654321))
        assert report["MMSI"].raw == 987654321
        assert report.message_type == 1
        with pytest.raises(KeyError):
            report["Unknown"]

    def test_negative_coordinates(self, decoder):
        """Test two's complement coordinates through the full pipeline."""
        buffer = synthetic_report(
            Longitude=(1 << 28) - 600000, Latitude=(1 << 27) - 1200000
        )
        assert extract_longitude(buffer) == (1 << 28) - 600000
        report = decoder.decode_buffer(buffer)
        assert report["Longitude"].value == "-1.000000 [deg]"
        assert report["Latitude"].value == "-2.000000 [deg]"

    def test_sentinels_do_not_abort(self, decoder):
        """Test a report full of unusable values still decodes fully."""
        buffer = synthetic_report(
            **{
                "Message Type": 3,
                "Rate Of Turn": 128,
                "Speed Over Ground": 1023,
                "Longitude": 0x6791AC0,
                "Latitude": 0x3412140,
                "Course Over Ground": 3600,
                "True Heading": 511,
                "Time Stamp": 60,
                "Maneuver Indicator": 3,
            }
        )
        report = decoder.decode_buffer(buffer)
        assert len(report.fields) == len(POSITION_REPORT_FIELDS)
        assert report["Rate Of Turn"].value == NOT_AVAILABLE
        assert report["Longitude"].value == NOT_AVAILABLE
        assert report["Latitude"].value == NOT_AVAILABLE
        assert report["Maneuver Indicator"].value == "error"

    def test_radio_status_last_bits(self, decoder):
        buffer = synthetic_report(**{"Radio Status": 0x7FFFF})
        assert extract_radio_status(buffer) == 0x7FFFF
        assert decoder.decode_buffer(buffer)["Radio Status"].value == "524287"

    def test_short_payload(self, decoder):
        """Test payloads shorter than 168 bits fail explicitly."""
        with pytest.raises(FieldBoundsError):
            decoder.decode("13u@DR0P00")

    def test_invalid_character(self, decoder):
        with pytest.raises(InvalidCharacterError):
            decoder.decode("13u@DR0P00PRD6=PNR2P0000000x")

    def test_decode_armored_synthetic(self):
        """Test decoding from armored text built by encode_armor."""
        decoder = PositionReportDecoder(mode=ArmorMode.CORRECTED)
        payload = encode_armor(synthetic_report(), ArmorMode.CORRECTED)
        assert len(payload) == 28
        report = decoder.decode(payload)
        assert report["MMSI"].value == "123456789"


class TestRealPayload:
    """Tests against a real AIVDM payload."""

    def test_extraction(self, decoder):
        buffer = decoder.to_buffer(REAL_PAYLOAD)
        assert buffer.bit_length == 168
        assert extract_message_type(buffer) == 1
        assert extract_mmsi(buffer) == 265557128
        assert extract_longitude(buffer) == 4497606
        assert extract_latitude(buffer) == (1 << 27) - 33054198

    def test_decoded_values(self, decoder):
        values = decoder.decode(REAL_PAYLOAD).as_dict()
        assert values["Message Type"] == "Position Report Class A"
        assert values["Repeat Indicator"] == "0"
        assert values["MMSI"] == "265557128"
        assert values["Navigation Status"] == "Under way using engine"
        assert values["Rate Of Turn"] == NOT_AVAILABLE
        assert values["Speed Over Ground"] == "0.000000 [knots]"
        assert values["Position Accuracy"] == "<10m"
        assert values["Longitude"] == "7.496010 [deg]"
        assert values["Latitude"] == "-55.090330 [deg]"
        assert values["Course Over Ground"] == "0.000000 [deg]"
        assert values["True Heading"] == "0 [deg]"
        assert values["Time Stamp"] == "0 [s]"
        assert values["Maneuver Indicator"] == NOT_AVAILABLE
        assert values["RAIM Flag"] == "not in use"

    def test_same_result_in_both_modes(self):
        """Test payloads without 'f' decode identically in both tables."""
        reference = PositionReportDecoder(mode=ArmorMode.REFERENCE)
        corrected = PositionReportDecoder(mode=ArmorMode.CORRECTED)
        assert reference.decode(REAL_PAYLOAD) == corrected.decode(REAL_PAYLOAD)


class TestFormatRecord:
    """Tests for record text rendering."""

    def test_layout(self, decoder):
        record = format_record(decoder.decode_buffer(synthetic_report()))
        lines = record.split("\n")
        assert lines[0] == "Message type: Position Report Class A"
        assert lines[1] == "\tCount: 0"
        assert lines[2] == "\tMMSI: 123456789"
        assert lines[3] == "\tStatus: Under way using engine"
        assert lines[4] == "\tROT: 0 [deg/min]"
        assert lines[5] == "\tSOG: 0.000000 [knots]"
        assert lines[6] == "\tAccuracy: >10m"
        assert lines[12] == "\tManeuver: not available"
        assert lines[13] == "\tRAIM: not in use"
        assert lines[14] == "\tRadio: 0"
        assert record.endswith("\n")
        assert len(lines) == 16

    def test_partial_report(self):
        report = DecodedReport(protocol="test", message_type=1)
        assert format_record(report) == "\n"
