"""
Reader for collected AIVDM text logs.

Each log line holds a date, a time and one NMEA sentence separated
by whitespace, for example:

    2019-05-04 12:00:01 !AIVDM,1,1,,A,13aEOK?P00PD2wVMdLDRhgvL289?,0*26

Checksums are not verified and multi-part sentences are not
reassembled.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, TextIO, Union

logger = logging.getLogger(__name__)

SENTENCE_FIELDS = 7


class SentenceFormatError(ValueError):
    """Raised when a log line or sentence cannot be split into its fields."""

    pass


@dataclass
class AivdmSentence:
    """Comma-separated fields of one AIVDM/AIVDO sentence."""

    format: str  # "!AIVDM" or "!AIVDO"
    fragment_count: str
    fragment_number: str
    sequence_id: str
    channel: str
    payload: str
    trailer: str = ""  # Fill bits and checksum, e.g. "0*26"

    @property
    def is_fragment(self) -> bool:
        """True if the sentence is part of a multi-part message."""
        return self.fragment_count not in ("", "1")


@dataclass
class LogRecord:
    """One line of a collected log."""

    date: str
    time: str
    sentence: AivdmSentence
    line_number: int = 0

    @property
    def timestamp(self) -> str:
        return f"{self.date} {self.time}"

    @property
    def payload(self) -> str:
        return self.sentence.payload


def parse_sentence(text: str) -> AivdmSentence:
    """
    Split a sentence into its fields.

    Args:
        text: Sentence text

    Returns:
        Parsed sentence

    Raises:
        SentenceFormatError: If fewer than six fields are present
    """
    parts = text.strip().split(",", SENTENCE_FIELDS - 1)
    if len(parts) < SENTENCE_FIELDS - 1:
        raise SentenceFormatError(
            f"Expected at least {SENTENCE_FIELDS - 1} fields, got {len(parts)}: {text!r}"
        )
    parts += [""] * (SENTENCE_FIELDS - len(parts))
    return AivdmSentence(*parts)


def parse_line(line: str, line_number: int = 0) -> LogRecord:
    """
    Parse one log line.

    Args:
        line: Log line
        line_number: 1-based position in the log, for diagnostics

    Returns:
        Parsed record

    Raises:
        SentenceFormatError: If the line is malformed
    """
    tokens = line.split()
    if len(tokens) < 3:
        raise SentenceFormatError(f"Expected date, time and sentence: {line!r}")
    date, time, sentence = tokens[0], tokens[1], tokens[2]
    return LogRecord(date, time, parse_sentence(sentence), line_number)


def read_records(stream: TextIO) -> Iterator[LogRecord]:
    """
    Read records from a text stream.

    Blank lines are ignored; malformed lines are logged and skipped.

    Args:
        stream: Open text stream

    Yields:
        Parsed records in input order
    """
    for line_number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            yield parse_line(line, line_number)
        except SentenceFormatError as e:
            logger.warning(f"Skipping line {line_number}: {e}")


def read_log(path: Union[str, Path], encoding: str = "utf-8") -> Iterator[LogRecord]:
    """
    Read records from a log file.

    Args:
        path: Log file path
        encoding: File encoding

    Yields:
        Parsed records in file order

    Raises:
        OSError: If the file cannot be opened
    """
    with open(path, "r", encoding=encoding) as f:
        yield from read_records(f)
