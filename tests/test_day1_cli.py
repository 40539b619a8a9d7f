"""Tests for the Day 1 command-line driver."""

from __future__ import annotations

import pytest

from advent_of_code.day1 import main


def test_main_uses_bundled_input(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out == "The password is: 3\n"


def test_main_reads_input_file(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    input_file = tmp_path / "day1_input.txt"
    input_file.write_text("L50\n\n   \nR100\nR1\n")

    assert main(["--input", str(input_file)]) == 0
    assert capsys.readouterr().out == "The password is: 2\n"


def test_main_start_position(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    input_file = tmp_path / "day1_input.txt"
    input_file.write_text("R10\n")

    assert main(["--input", str(input_file), "--start", "90"]) == 0
    assert capsys.readouterr().out == "The password is: 1\n"


def test_main_debug_trace(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--debug"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "Info - number of rotations: 10"
    assert lines[1] == "The dial starts by pointing at 50."
    assert lines[2] == "The dial is rotated L68 to point at 82."
    assert lines[4] == "The dial is rotated R48 to point at 0."
    assert lines[-1] == "The password is: 3"
    assert len(lines) == 13


def test_main_malformed_input_still_prints(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    input_file = tmp_path / "day1_input.txt"
    input_file.write_text("L50\nLABC\nR100\n")

    assert main(["--input", str(input_file)]) == 0
    assert capsys.readouterr().out == "The password is: 1\n"


def test_main_missing_input_file(tmp_path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "nope.txt"

    assert main(["--input", str(missing)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith(f"Error: cannot read '{missing}'")


def test_main_rejects_bad_start() -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--start", "fifty"])
    assert excinfo.value.code == 2
