"""Byte-level writing and reading primitives.

This module provides the fixed-width big-endian field handling shared by
the encoder and decoder. All bounds checks for decoding live in ByteReader,
so the decoder never touches the underlying buffer directly.
"""

from __future__ import annotations

import struct
from typing import Union

from ..exceptions import TruncatedInput
from .tags import Width, family_tag, select_width

BytesLike = Union[bytes, bytearray, memoryview]

_FLOAT32 = struct.Struct(">f")
_FLOAT64 = struct.Struct(">d")


class ByteWriter:
    """Accumulates encoded fields into a byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_tag(5)
        >>> writer.write_uint(2000, Width.W16)
        >>> writer.to_bytes()
        b'\\x05\\x07\\xd0'
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buf = bytearray()

    def write_tag(self, tag: int) -> None:
        """Write a single tag byte."""
        self._buf.append(tag)

    def write_uint(self, value: int, width: Width) -> None:
        """Write an unsigned integer as a big-endian field of ``width`` bytes.

        Args:
            value: Unsigned integer value to write (must be >= 0)
            width: Field width

        Raises:
            ValueError: If value is negative or doesn't fit in width
        """
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")
        if value >= width.limit:
            raise ValueError(f"Value {value} requires more than {width.value} bytes")
        self._buf += value.to_bytes(width.value, "big")

    def write_bytes(self, data: BytesLike) -> None:
        """Write raw bytes."""
        self._buf += data

    def write_header(self, base: int, n: int, what: str = "length") -> None:
        """Write a sized family tag and its length/magnitude field.

        The width class is the smallest that holds ``n``.

        Raises:
            ValueTooLarge: If ``n >= 2 ** 64``
        """
        width = select_width(n, what)
        self.write_tag(family_tag(base, width))
        self.write_uint(n, width)

    def write_float64(self, value: float) -> None:
        """Write an IEEE-754 double, big-endian."""
        self._buf += _FLOAT64.pack(value)

    def __len__(self) -> int:
        return len(self._buf)

    def to_bytes(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buf)


class ByteReader:
    """Reads fields from a byte buffer with a moving cursor.

    Offsets reported in errors are absolute within the top-level input, even
    for readers created with sub_reader().

    Example:
        >>> reader = ByteReader(b"\\x05\\x07\\xd0")
        >>> reader.read_tag()
        5
        >>> reader.read_uint(Width.W16)
        2000
    """

    def __init__(self, data: BytesLike, base_offset: int = 0) -> None:
        """Initialize a reader over ``data``.

        Args:
            data: Buffer to read
            base_offset: Absolute offset of ``data[0]`` in the original input
        """
        self._view = memoryview(data).cast("B")
        self._position = 0
        self._base_offset = base_offset

    def _take(self, n: int) -> memoryview:
        available = len(self._view) - self._position
        if n > available:
            raise TruncatedInput(self.position(), n, available)
        chunk = self._view[self._position : self._position + n]
        self._position += n
        return chunk

    def read_tag(self) -> int:
        """Read one tag byte.

        Raises:
            TruncatedInput: If the buffer is exhausted
        """
        return self._take(1)[0]

    def read_uint(self, width: Width) -> int:
        """Read a big-endian unsigned integer of ``width`` bytes."""
        return int.from_bytes(self._take(width.value), "big")

    def read_bytes(self, n: int) -> bytes:
        """Read exactly ``n`` raw bytes."""
        return self._take(n).tobytes()

    def read_float32(self) -> float:
        """Read an IEEE-754 single and widen it to a Python float."""
        return _FLOAT32.unpack(self._take(4))[0]

    def read_float64(self) -> float:
        """Read an IEEE-754 double."""
        return _FLOAT64.unpack(self._take(8))[0]

    def sub_reader(self, n: int) -> ByteReader:
        """Consume ``n`` bytes and return a reader confined to them."""
        offset = self.position()
        return ByteReader(self._take(n), base_offset=offset)

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._view) - self._position

    def exhausted(self) -> bool:
        """Return True when every byte has been read."""
        return self._position >= len(self._view)

    def position(self) -> int:
        """Return the absolute read position."""
        return self._base_offset + self._position

    def rest(self) -> bytes:
        """Return the unread bytes without consuming them."""
        return self._view[self._position :].tobytes()
