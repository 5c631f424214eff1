"""Encoded buffer analysis CLI command."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

from ..codec.buffer import ByteReader
from ..codec.decoder import decode
from ..codec.tags import TAG_TABLE, Kind
from ..exceptions import MalformedTag, NestingTooDeep, TrailingInput, UnsupportedValue
from ..options import CodecOptions
from ..utils.sizing import json_size

_PREVIEW = 24


def describe(data: bytes, options: Optional[CodecOptions] = None) -> Iterator[str]:
    """Yield one line per encoded item: offset, tag, category, width, preview.

    Nested items are indented under their container. The walk fails with the
    same errors as decode on malformed input, including NestingTooDeep past
    ``options.max_depth``.

    Example:
        >>> list(describe(b"\\x20\\x02\\x04\\x2a"))
        ['0000  tag 32  array    w8  body=2', '0002    tag 4   uint     w8    42']
    """
    max_depth = (options or CodecOptions()).max_depth
    reader = ByteReader(data)
    yield from _walk(reader, 0, max_depth)
    if not reader.exhausted():
        raise TrailingInput(reader.rest())


def _walk(reader: ByteReader, level: int, max_depth: int) -> Iterator[str]:
    offset = reader.position()
    tag = reader.read_tag()
    entry = TAG_TABLE[tag]
    if entry is None:
        raise MalformedTag(tag, offset)
    kind, width = entry
    head = f"{offset:04d}  {'  ' * level}tag {tag:<3} {kind.name.lower():<8} "
    head += f"w{width.value * 8:<3}" if width is not None else "    "

    if width is None:
        if kind is Kind.FLOAT32:
            yield f"{head}  {reader.read_float32()!r}"
        elif kind is Kind.FLOAT64:
            yield f"{head}  {reader.read_float64()!r}"
        else:
            yield head.rstrip()
        return

    n = reader.read_uint(width)
    if kind is Kind.UINT:
        yield f"{head}  {n}"
    elif kind is Kind.NINT:
        yield f"{head}  {-n}"
    elif kind is Kind.STRING:
        raw = reader.read_bytes(n)
        preview = raw[:_PREVIEW] + (b"..." if n > _PREVIEW else b"")
        yield f"{head}  len={n} {preview!r}"
    else:
        if level >= max_depth:
            raise NestingTooDeep(max_depth)
        yield f"{head}body={n}"
        body = reader.sub_reader(n)
        while not body.exhausted():
            yield from _walk(body, level + 1, max_depth)


def read_input(file_path: Path, hex_input: bool = False) -> bytes:
    """Read an encoded buffer from a file, raw or as hex text."""
    if hex_input:
        return bytes.fromhex("".join(file_path.read_text().split()))
    return file_path.read_bytes()


def analyze_file(file_path: Path, hex_input: bool = False) -> None:
    """Print the structure and size summary of an encoded buffer.

    Args:
        file_path: File holding one encoded value
        hex_input: Treat the file as hex text instead of raw bytes
    """
    data = read_input(file_path, hex_input)
    lines: List[str] = list(describe(data))

    print("|" * 7, "bjson: binary JSON codec", "|" * 7)
    print(f"{len(data)} bytes, {len(lines)} item{'s' if len(lines) != 1 else ''}.")
    print()
    for line in lines:
        print(line)
    print()

    print(f"{'=' * 24} Summary {'=' * 24}")
    value = decode(data, CodecOptions(text=False))
    try:
        size = json_size(value)
    except UnsupportedValue:
        print("Compact JSON size: n/a (strings are not UTF-8)")
    else:
        print(f"Compact JSON size: {size} bytes")
        print(f"Compression vs JSON: {size / len(data):.2f}x")
    print()
