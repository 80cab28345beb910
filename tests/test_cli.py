"""Tests for the command line interface."""

import json
import logging

import pytest

from ais_module import __version__
from ais_module.cli import create_parser, main

REAL_PAYLOAD = "13u@DR0P00PRD6=PNR2P00000000"
# Same payload with the message type changed to 5
TYPE5_PAYLOAD = "53u@DR0P00PRD6=PNR2P00000000"
LINE = f"2019-05-04 12:00:01 !AIVDM,1,1,,A,{REAL_PAYLOAD},0*5A\n"


class TestParser:
    """Tests for argument parsing."""

    def test_decode_arguments(self):
        args = create_parser().parse_args(
            ["decode", "in.txt", "out", "--armor-mode", "corrected", "--types", "1", "3"]
        )
        assert args.input == "in.txt"
        assert args.output_dir == "out"
        assert args.armor_mode == "corrected"
        assert args.types == [1, 3]

    def test_invalid_type_rejected(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["decode", "in.txt", "out", "--types", "5"])

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out


class TestCommands:
    """Tests for subcommands."""

    def test_no_command_shows_info(self, capsys):
        assert main([]) == 0
        assert "AIVDM Position Report Decoder" in capsys.readouterr().out

    def test_fields(self, capsys):
        assert main(["fields"]) == 0
        out = capsys.readouterr().out
        assert "MMSI" in out
        assert "Radio Status" in out

    def test_payload(self, capsys):
        assert main(["payload", REAL_PAYLOAD]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Message type: Position Report Class A\n")
        assert "\tMMSI: 265557128\n" in out
        assert "\tLAT: -55.090330 [deg]\n" in out

    def test_payload_invalid_character(self, capsys):
        assert main(["payload", "13u@x"]) == 1
        assert "Invalid armor character" in capsys.readouterr().out

    def test_payload_too_short(self, capsys):
        assert main(["payload", "13u@DR0P00"]) == 1

    def test_decode(self, tmp_path, capsys):
        input_path = tmp_path / "log.txt"
        input_path.write_text(LINE * 2)
        output_dir = tmp_path / "out"

        assert main(["decode", str(input_path), str(output_dir)]) == 0
        out = capsys.readouterr().out
        assert "Processing data" in out
        assert "Processing finished successfully" in out

        content = (output_dir / "265557128.txt").read_text()
        assert content.count("2019-05-04 12:00:01\n") == 2

    def test_decode_quiet(self, tmp_path, capsys):
        input_path = tmp_path / "log.txt"
        input_path.write_text(LINE)
        assert main(["decode", "-q", str(input_path), str(tmp_path / "out")]) == 0
        assert capsys.readouterr().out == ""

    def test_decode_missing_input(self, tmp_path, capsys):
        assert main(["decode", str(tmp_path / "missing.txt"), str(tmp_path / "out")]) == 1
        assert "Could not open input file" in capsys.readouterr().out

    def test_decode_type_filter(self, tmp_path):
        input_path = tmp_path / "log.txt"
        input_path.write_text(LINE)
        output_dir = tmp_path / "out"
        assert main(["decode", "-q", str(input_path), str(output_dir), "--types", "2"]) == 0
        assert not (output_dir / "265557128.txt").exists()

    def test_decode_with_config(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"output_extension": ".log"}))
        input_path = tmp_path / "log.txt"
        input_path.write_text(LINE)
        output_dir = tmp_path / "out"

        args = ["decode", "-q", "-c", str(config_path), str(input_path), str(output_dir)]
        assert main(args) == 0
        assert (output_dir / "265557128.log").exists()

    def test_decode_bad_config(self, tmp_path, capsys):
        args = ["decode", "-c", str(tmp_path / "missing.json"), "in.txt", "out"]
        assert main(args) == 1
        assert "Could not load configuration" in capsys.readouterr().out

    def test_payload_other_message_type(self, capsys):
        assert main(["payload", TYPE5_PAYLOAD]) == 1
        out = capsys.readouterr().out
        assert "Message type 5 is not a position report" in out
        assert "MMSI" not in out


@pytest.fixture
def root_level():
    """Restore the root logger level after a test changes it."""
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


class TestLogLevel:
    """Tests for log level selection."""

    def _write_inputs(self, tmp_path, log_level):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"log_level": log_level}))
        input_path = tmp_path / "log.txt"
        input_path.write_text(LINE)
        return config_path, input_path

    def test_default_level(self, root_level):
        assert main(["fields"]) == 0
        assert root_level.level == logging.WARNING

    def test_config_level_applied(self, tmp_path, root_level):
        config_path, input_path = self._write_inputs(tmp_path, "DEBUG")
        args = ["decode", "-q", "-c", str(config_path), str(input_path), str(tmp_path / "out")]
        assert main(args) == 0
        assert root_level.level == logging.DEBUG

    def test_command_line_level_wins(self, tmp_path, root_level):
        config_path, input_path = self._write_inputs(tmp_path, "DEBUG")
        args = [
            "--log-level",
            "ERROR",
            "decode",
            "-q",
            "-c",
            str(config_path),
            str(input_path),
            str(tmp_path / "out"),
        ]
        assert main(args) == 0
        assert root_level.level == logging.ERROR
