"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from ieeeio.cli.main import main


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "ieeeio.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "ieeeio: Portable binary integer and IEEE-754 float I/O" in result.stdout
    assert "--decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "ieeeio.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "ieeeio 0.1.0" in result.stdout


def test_cli_decode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--decode", "40 09 21 fb 54 44 2d 18"]) == 0
    assert capsys.readouterr().out.strip() == "3.141592653589793"


def test_cli_decode_little_endian(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--decode", "0x0000803f", "--format", "binary32", "--order", "little"]) == 0
    assert capsys.readouterr().out.strip() == "1.0"


def test_cli_encode(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--encode", "-0.025", "--format", "binary32", "--order", "little"]) == 0
    assert capsys.readouterr().out.strip() == "cd cc cc bc"


def test_cli_encode_infinity(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--encode", "1e400"]) == 0
    assert capsys.readouterr().out.strip() == "7f f0 00 00 00 00 00 00"


def test_cli_inspect(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--inspect", "00000001", "--format", "binary32"]) == 0
    out = capsys.readouterr().out
    assert "binary32 (big-endian)" in out
    assert "subnormal" in out
    assert "00000000000000000000001" in out


def test_cli_bad_hex(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--decode", "zz"]) == 1
    assert "Invalid hex input" in capsys.readouterr().err


def test_cli_wrong_length(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--decode", "3ff0"]) == 1
    assert "exactly 8 bytes" in capsys.readouterr().err


def test_cli_bad_number(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--encode", "pi"]) == 1
    assert "Not a number" in capsys.readouterr().err


def test_cli_no_command(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage:" in capsys.readouterr().out
