"""Tests for the calclex command line driver."""

import json
from pathlib import Path

import pytest

from calclex.cli import build_parser, main


class TestArgumentParsing:
    """Mode flags and defaults."""

    def test_text_mode_is_default(self) -> None:
        args = build_parser().parse_args(["a + b"])
        assert args.file is False
        assert args.input == "a + b"

    def test_file_flag(self) -> None:
        args = build_parser().parse_args(["-f", "prog.calc"])
        assert args.file is True

    def test_text_flag(self) -> None:
        args = build_parser().parse_args(["--text", "x"])
        assert args.file is False

    def test_modes_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["-f", "-t", "x"])

    def test_input_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestTextMode:
    """Lexing the INPUT argument."""

    def test_prints_tokens(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["3 - 4"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Token(DECIMAL, '3', 1:1)",
            "Token(OPERATOR, MINUS, 1:3)",
            "Token(DECIMAL, '4', 1:5)",
        ]

    def test_stops_on_first_error(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["a : b ? c"]) == 1
        assert capsys.readouterr().out.splitlines() == [
            "Token(IDENT, 'a', 1:1)",
            "Error Unknown symbol at position 3",
        ]

    def test_keep_going(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--keep-going", "a : b ? c"]) == 1
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == "Error Unknown symbol at position 3"
        assert lines[3] == "Error Unknown token at position 6"
        assert lines[-1] == "Token(IDENT, 'c', 1:9)"

    def test_empty_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["   "]) == 0
        assert capsys.readouterr().out == ""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "x := 1"]) == 0
        records = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert [r["type"] for r in records] == ["IDENT", "ASSIGN", "DECIMAL"]

    def test_json_error_record(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "#"]) == 1
        (record,) = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
        assert record["error"] == "UNKNOWN_TOKEN"
        assert record["start"] == 0


class TestFileMode:
    """Lexing a file's contents."""

    def test_lexes_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "prog.calc"
        path.write_text("x := 1\ny := x * 2\n", encoding="utf-8")
        assert main(["-f", str(path)]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 8
        assert lines[3] == "Token(IDENT, 'y', 2:1)"

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--file", str(tmp_path / "nope.calc")]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot read" in captured.err

    def test_json_records_source_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = tmp_path / "one.calc"
        path.write_text("z", encoding="utf-8")
        assert main(["-f", "--json", str(path)]) == 0
        record = json.loads(capsys.readouterr().out)
        assert record["source_file"] == str(path)


class TestJsonErrors:
    """--json keeps stdout machine-readable and reports errors on stderr."""

    def test_error_line_on_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "a : b"]) == 1
        captured = capsys.readouterr()
        records = [json.loads(line) for line in captured.out.splitlines()]
        assert [r["type"] for r in records] == ["IDENT", "ERROR"]
        assert captured.err.splitlines() == ["Error Unknown symbol at position 3"]

    def test_no_stderr_without_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--json", "a"]) == 0
        assert capsys.readouterr().err == ""
