#!/usr/bin/env python3
"""
AIS Module - Command Line Interface

Main entry point for the AIS decoder.
Decodes collected AIVDM logs into per-sender report files.
"""

import argparse
import logging
import sys
from typing import Optional

from . import __version__


def _setup_logging(level: str) -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once handlers exist, so set the level directly
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.WARNING))


def cmd_info(args: argparse.Namespace) -> int:
    """Display module information."""
    print(f"AIS Module v{__version__}")
    print()
    print("AIVDM Position Report Decoder")
    print("=============================")
    print()
    print("Supported messages:")
    print("  - Type 1: Position Report Class A")
    print("  - Type 2: Position Report Class A (Assigned schedule)")
    print("  - Type 3: Position Report Class A (Response to interrogation)")
    print()
    print("Input format (one sentence per line):")
    print("  <date> <time> !AIVDM,1,1,,A,<payload>,0*<checksum>")
    print()
    print("Example:")
    print("  ais-decode decode ./AIS_messages.txt ./output/")
    return 0


def cmd_fields(args: argparse.Namespace) -> int:
    """Print the position report field table."""
    from .protocols.fields import POSITION_REPORT_FIELDS

    print(f"{'Field':<20} {'Offset':>6} {'Length':>6}")
    for descriptor in POSITION_REPORT_FIELDS:
        print(f"{descriptor.name:<20} {descriptor.offset:>6} {descriptor.length:>6}")
    return 0


def _load_config(args: argparse.Namespace):
    from .core.config import ConfigValidationError, DecoderConfig

    if args.config:
        config = DecoderConfig.load(args.config)
        if config is None:
            print(f"Error: Could not load configuration: {args.config}")
            return None
    else:
        config = DecoderConfig()

    overrides = config.to_dict()
    if getattr(args, "armor_mode", None):
        overrides["armor_mode"] = args.armor_mode
    if getattr(args, "types", None):
        overrides["message_types"] = args.types

    try:
        return DecoderConfig.from_dict(overrides)
    except ConfigValidationError as e:
        print(f"Error: {e}")
        return None


def cmd_decode(args: argparse.Namespace) -> int:
    """Decode a log file into per-sender files."""
    from .core.processor import LogProcessor

    config = _load_config(args)
    if config is None:
        return 1
    if args.log_level is None:
        _setup_logging(config.log_level)

    def progress(lines: int) -> None:
        print(".", end="", flush=True)

    processor = LogProcessor(config, progress_callback=None if args.quiet else progress)

    if not args.quiet:
        print("Processing data")
    try:
        stats = processor.process_file(args.input, args.output_dir)
    except OSError as e:
        print(f"Error: Could not open input file: {args.input} ({e})")
        return 1

    if not args.quiet:
        print()
        print("Processing finished successfully")
        print(f"  Lines read:        {stats.lines_read}")
        print(f"  Reports written:   {stats.reports_written}")
        print(f"  Senders:           {stats.sender_count}")
        print(f"  Other types:       {stats.skipped_message_type}")
        print(f"  Multi-part:        {stats.skipped_fragments}")
        print(f"  Invalid payloads:  {stats.structural_errors}")
        if stats.write_failures:
            print(f"  Write failures:    {stats.write_failures}")

    return 0


def cmd_payload(args: argparse.Namespace) -> int:
    """Decode a single armored payload."""
    from .core.bit_buffer import DecodeError
    from .protocols.armor import ArmorMode
    from .protocols.fields import extract_message_type
    from .protocols.position_report import PositionReportDecoder, format_record

    decoder = PositionReportDecoder(mode=ArmorMode(args.armor_mode or "reference"))
    try:
        buffer = decoder.to_buffer(args.payload)
        if not decoder.can_decode(buffer):
            print(
                f"Error: Message type {extract_message_type(buffer)} "
                "is not a position report"
            )
            return 1
        report = decoder.decode_buffer(buffer)
    except DecodeError as e:
        print(f"Error: {e}")
        return 1

    print(format_record(report), end="")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="ais-decode",
        description="AIS Module - AIVDM Position Report Decoder",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: config log_level, else WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Info command
    info_parser = subparsers.add_parser("info", help="Display module information")
    info_parser.set_defaults(func=cmd_info)

    # Fields command
    fields_parser = subparsers.add_parser("fields", help="Show position report field layout")
    fields_parser.set_defaults(func=cmd_fields)

    # Decode command
    decode_parser = subparsers.add_parser("decode", help="Decode a log file")
    decode_parser.add_argument("input", help="Input log file path")
    decode_parser.add_argument("output_dir", help="Output directory for per-MMSI files")
    decode_parser.add_argument(
        "--config", "-c", type=str, help="JSON configuration file"
    )
    decode_parser.add_argument(
        "--armor-mode",
        choices=["reference", "corrected"],
        help="Armor table (default: reference)",
    )
    decode_parser.add_argument(
        "--types",
        type=int,
        nargs="+",
        choices=[1, 2, 3],
        help="Message types to decode (default: 1 2 3)",
    )
    decode_parser.add_argument(
        "--quiet", "-q", action="store_true", help="Suppress progress and summary"
    )
    decode_parser.set_defaults(func=cmd_decode)

    # Payload command
    payload_parser = subparsers.add_parser("payload", help="Decode a single payload")
    payload_parser.add_argument("payload", help="Armored payload string")
    payload_parser.add_argument(
        "--armor-mode",
        choices=["reference", "corrected"],
        help="Armor table (default: reference)",
    )
    payload_parser.set_defaults(func=cmd_payload)

    return parser


def main(argv: Optional[list] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.log_level or "WARNING")

    if args.command is None:
        # No command specified - show info
        return cmd_info(args)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
