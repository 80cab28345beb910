"""
Log processing pipeline.

Reads a collected AIVDM log, decodes Class A position reports and
routes each decoded record to its sender's output file.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..io.reader import LogRecord, read_log
from ..io.writer import MmsiFileRouter
from ..protocols.base import DecodedReport
from ..protocols.fields import MMSI, extract_message_type
from ..protocols.position_report import PositionReportDecoder, format_record
from .bit_buffer import DecodeError
from .config import DecoderConfig

logger = logging.getLogger(__name__)


@dataclass
class ProcessingStats:
    """Log processing statistics."""

    lines_read: int = 0
    reports_written: int = 0
    skipped_message_type: int = 0
    skipped_fragments: int = 0
    structural_errors: int = 0
    write_failures: int = 0
    senders: List[str] = field(default_factory=list)

    @property
    def sender_count(self) -> int:
        return len(self.senders)


class LogProcessor:
    """
    Decodes position reports from a log into per-sender files.

    A record whose payload cannot be decoded (bad armor character or
    too short) is logged and skipped; processing continues with the
    next record.
    """

    def __init__(
        self,
        config: Optional[DecoderConfig] = None,
        progress_callback: Optional[Callable[[int], None]] = None,
    ):
        """
        Initialize processor.

        Args:
            config: Decoder configuration (defaults if None)
            progress_callback: Called with the line count every
                config.progress_interval lines
        """
        self._config = config or DecoderConfig()
        self._decoder = PositionReportDecoder(
            mode=self._config.mode,
            message_types=self._config.message_types,
        )
        self._progress_callback = progress_callback

    @property
    def config(self) -> DecoderConfig:
        return self._config

    @property
    def decoder(self) -> PositionReportDecoder:
        return self._decoder

    def decode_record(self, record: LogRecord) -> Optional[DecodedReport]:
        """
        Decode the payload of one record.

        Args:
            record: Parsed log record

        Returns:
            Decoded report, or None if the message type is not selected

        Raises:
            DecodeError: If the payload is structurally invalid
        """
        buffer = self._decoder.to_buffer(record.payload)
        if not self._decoder.can_decode(buffer):
            logger.debug(
                f"Line {record.line_number}: skipping message type "
                f"{extract_message_type(buffer)}"
            )
            return None

        return self._decoder.decode_buffer(buffer)

    @staticmethod
    def render(record: LogRecord, report: DecodedReport) -> str:
        """Format a decoded report as timestamped output text."""
        return f"{record.timestamp}\n{format_record(report)}\n"

    def process_records(
        self, records: Iterable[LogRecord], router: MmsiFileRouter
    ) -> ProcessingStats:
        """
        Decode records and write them through a router.

        Args:
            records: Parsed log records
            router: Per-sender output router

        Returns:
            Processing statistics
        """
        stats = ProcessingStats()
        interval = self._config.progress_interval

        for record in records:
            stats.lines_read += 1
            if self._progress_callback and interval and stats.lines_read % interval == 0:
                self._progress_callback(stats.lines_read)

            if record.sentence.is_fragment:
                logger.debug(f"Line {record.line_number}: skipping multi-part sentence")
                stats.skipped_fragments += 1
                continue

            try:
                report = self.decode_record(record)
            except DecodeError as e:
                logger.warning(f"Line {record.line_number}: {e}")
                stats.structural_errors += 1
                continue

            if report is None:
                stats.skipped_message_type += 1
                continue

            mmsi = report[MMSI.name].value
            if router.write(mmsi, self.render(record, report)):
                stats.reports_written += 1
            else:
                stats.write_failures += 1

        stats.senders = router.written_mmsis
        return stats

    def process_file(
        self, input_path: Union[str, Path], output_dir: Union[str, Path]
    ) -> ProcessingStats:
        """
        Process a log file.

        Args:
            input_path: Log file path
            output_dir: Directory for per-sender files

        Returns:
            Processing statistics

        Raises:
            OSError: If the input file cannot be read
        """
        router = MmsiFileRouter(
            output_dir,
            extension=self._config.output_extension,
            encoding=self._config.encoding,
        )
        logger.info(f"Processing {input_path} into {router.output_dir}")
        stats = self.process_records(
            read_log(input_path, encoding=self._config.encoding), router
        )
        logger.info(
            f"Processed {stats.lines_read} lines, wrote {stats.reports_written} "
            f"reports for {stats.sender_count} senders"
        )
        return stats
