"""
Log input and per-sender output.
"""

from .reader import (
    AivdmSentence,
    LogRecord,
    SentenceFormatError,
    parse_line,
    parse_sentence,
    read_log,
    read_records,
)
from .writer import MmsiFileRouter

__all__ = [
    "AivdmSentence",
    "LogRecord",
    "SentenceFormatError",
    "parse_line",
    "parse_sentence",
    "read_log",
    "read_records",
    "MmsiFileRouter",
]
