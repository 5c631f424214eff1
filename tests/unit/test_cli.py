"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from bjson import CodecOptions, NestingTooDeep, Struct, __version__, decode, encode
from bjson.cli.analyze import describe


def run_cli(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "-m", "bjson.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_cli("--help")
    assert result.returncode == 0
    assert "bjson: binary JSON codec" in result.stdout
    assert "--analyze" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_cli("--version")
    assert result.returncode == 0
    assert f"bjson {__version__}" in result.stdout


def test_cli_encode_to_hex(tmp_path: Path) -> None:
    """Test --encode prints the encoding as hex."""
    source = tmp_path / "doc.json"
    source.write_text('{"hello": "world"}')

    result = run_cli("--encode", str(source))
    assert result.returncode == 0
    assert result.stdout.strip() == encode(Struct([("hello", "world")])).hex()


def test_cli_encode_to_file(tmp_path: Path) -> None:
    """Test --encode -o writes raw bytes."""
    source = tmp_path / "doc.json"
    source.write_text("[1, 2000, null]")
    target = tmp_path / "doc.bjson"

    result = run_cli("--encode", str(source), "-o", str(target))
    assert result.returncode == 0
    assert decode(target.read_bytes()) == [1, 2000, None]


def test_cli_decode(tmp_path: Path, reference_encoded: bytes) -> None:
    """Test --decode prints JSON text."""
    source = tmp_path / "doc.bjson"
    source.write_bytes(reference_encoded)

    result = run_cli("--decode", str(source))
    assert result.returncode == 0
    assert result.stdout.strip() == (
        '{"hello":"world","double":5.05,"int":42,"neg_int":-300000,'
        '"array":[1,2000,300000,"hello",null,true,false]}'
    )


def test_cli_decode_hex(tmp_path: Path) -> None:
    """Test --hex reads hex text input."""
    source = tmp_path / "doc.hex"
    source.write_text("24 0e 10 05 68 65 6c 6c 6f\n10 05 77 6f 72 6c 64\n")

    result = run_cli("--decode", str(source), "--hex")
    assert result.returncode == 0
    assert result.stdout.strip() == '{"hello":"world"}'


def test_cli_analyze(tmp_path: Path, reference_encoded: bytes) -> None:
    """Test --analyze prints the tag structure and a summary."""
    source = tmp_path / "doc.bjson"
    source.write_bytes(reference_encoded)

    result = run_cli("--analyze", str(source))
    assert result.returncode == 0
    assert "bjson: binary JSON codec" in result.stdout
    assert "83 bytes" in result.stdout
    assert "tag 36" in result.stdout
    assert "Compression vs JSON" in result.stdout


def test_cli_malformed_input(tmp_path: Path) -> None:
    """Test decode errors are reported with exit code 1."""
    source = tmp_path / "bad.bjson"
    source.write_bytes(b"\xff")

    result = run_cli("--decode", str(source))
    assert result.returncode == 1
    assert "malformed tag 255" in result.stderr


def test_cli_missing_file() -> None:
    """Test CLI with missing file."""
    result = run_cli("--decode", "nonexistent.bjson")
    assert result.returncode == 1
    assert "Error" in result.stderr or "not found" in result.stderr.lower()


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = run_cli()
    assert result.returncode == 0
    assert "bjson: binary JSON codec" in result.stdout


def test_describe_depth_limit(deeply_nested: bytes) -> None:
    """Test the structure dump stops at max_depth instead of recursing on."""
    with pytest.raises(NestingTooDeep):
        list(describe(deeply_nested))
    with pytest.raises(NestingTooDeep):
        list(describe(deeply_nested, CodecOptions(max_depth=400)))


def test_describe_within_depth() -> None:
    """Test nested containers inside the limit are listed with indentation."""
    lines = list(describe(encode([[1]]), CodecOptions(max_depth=2)))

    assert len(lines) == 3
    assert lines[2].startswith("0004      tag 4")


def test_cli_analyze_deep_input(tmp_path: Path, deeply_nested: bytes) -> None:
    """Test hostile nesting is reported as an error, not a traceback."""
    source = tmp_path / "deep.bjson"
    source.write_bytes(deeply_nested)

    result = run_cli("--analyze", str(source))
    assert result.returncode == 1
    assert "nesting exceeds max_depth=256" in result.stderr
    assert "Traceback" not in result.stderr
