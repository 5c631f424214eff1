"""Encoder: value tree to bjson bytes.

Each value is written as a tag byte followed by its payload. Integers,
string lengths and container body lengths all use the smallest width class
that holds them. Containers are encoded body-first so the body's byte length
can be written in front of it.
"""

from __future__ import annotations

import enum
from typing import Any, Optional

from ..exceptions import NestingTooDeep, UnsupportedValue
from ..options import CodecOptions
from ..values import Struct, iter_pairs, symbol_name
from .buffer import ByteWriter
from .tags import (
    TAG_ARRAY,
    TAG_EMPTY_STRING,
    TAG_FALSE,
    TAG_FLOAT64,
    TAG_MAP,
    TAG_NINT,
    TAG_NULL,
    TAG_STRING,
    TAG_TRUE,
    TAG_UINT,
)


class Encoder:
    """Encodes value trees according to a CodecOptions instance.

    Encoders hold no per-call state and can be shared between threads.
    """

    def __init__(self, options: Optional[CodecOptions] = None) -> None:
        self.options = options or CodecOptions()

    def encode(self, value: Any) -> bytes:
        """Encode a single value tree.

        Args:
            value: None, bool, int, float, str/bytes, list/tuple, Struct/dict,
                or an enum member (encoded as its name)

        Returns:
            Encoded bytes

        Raises:
            ValueTooLarge: If an integer magnitude or a length is >= 2**64
            UnsupportedValue: If the tree holds a value outside the model
            NestingTooDeep: If containers nest deeper than options.max_depth
        """
        writer = ByteWriter()
        self._encode_value(writer, value, 0, "$")
        return writer.to_bytes()

    def _encode_value(self, writer: ByteWriter, value: Any, depth: int, path: str) -> None:
        # Constants
        if value is None:
            writer.write_tag(TAG_NULL)
            return

        # bool is an int subclass, so it must be matched before int
        if isinstance(value, bool):
            writer.write_tag(TAG_TRUE if value else TAG_FALSE)
            return

        # Symbols; IntEnum members are ints too and still encode as names
        if isinstance(value, enum.Enum):
            self._encode_string(writer, symbol_name(value).encode("utf-8"))
            return

        if isinstance(value, int):
            if value >= 0:
                writer.write_header(TAG_UINT, value, "integer")
            else:
                writer.write_header(TAG_NINT, -value, "integer")
            return

        # Always double precision; float32 is a decode-only format
        if isinstance(value, float):
            writer.write_tag(TAG_FLOAT64)
            writer.write_float64(value)
            return

        if isinstance(value, str):
            try:
                raw = value.encode("utf-8")
            except UnicodeEncodeError as err:
                raise UnsupportedValue(value, path) from err
            self._encode_string(writer, raw)
            return

        if isinstance(value, (bytes, bytearray, memoryview)):
            self._encode_string(writer, bytes(value))
            return

        if isinstance(value, (list, tuple)):
            body = self._child_writer(depth)
            for i, item in enumerate(value):
                self._encode_value(body, item, depth + 1, f"{path}[{i}]")
            writer.write_header(TAG_ARRAY, len(body), "array length")
            writer.write_bytes(body.to_bytes())
            return

        if isinstance(value, (Struct, dict)):
            body = self._child_writer(depth)
            for i, pair in enumerate(iter_pairs(value)):
                if not isinstance(pair, tuple) or len(pair) != 2:
                    raise UnsupportedValue(pair, f"{path}<{i}>")
                key, item = pair
                self._encode_value(body, key, depth + 1, f"{path}<{i}>")
                self._encode_value(body, item, depth + 1, f"{path}[{key!r}]")
            writer.write_header(TAG_MAP, len(body), "map length")
            writer.write_bytes(body.to_bytes())
            return

        raise UnsupportedValue(value, path)

    def _encode_string(self, writer: ByteWriter, raw: bytes) -> None:
        # Zero-length strings have their own one-byte form
        if not raw:
            writer.write_tag(TAG_EMPTY_STRING)
            return
        writer.write_header(TAG_STRING, len(raw), "string length")
        writer.write_bytes(raw)

    def _child_writer(self, depth: int) -> ByteWriter:
        if depth >= self.options.max_depth:
            raise NestingTooDeep(self.options.max_depth)
        return ByteWriter()


def encode(value: Any, options: Optional[CodecOptions] = None) -> bytes:
    """Encode a value tree to bjson bytes.

    Examples:
        ```python
        from bjson import Struct, encode

        encode(42)                          # b'\\x04\\x2a'
        encode(-300000)                     # b'\\x0a\\x00\\x04\\x93\\xe0'
        encode(Struct([("hello", "world")]))
        ```
    """
    return Encoder(options).encode(value)


__all__ = ["Encoder", "encode"]
