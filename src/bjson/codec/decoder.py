"""Decoder: bjson bytes to value tree.

Decoding reads one tag byte, looks it up in the tag table and consumes only
the payload that tag requires. Container bodies are read through a reader
confined to the declared body length, so a child that runs past its
container's end is reported as truncated input rather than silently reading
the bytes that follow.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from ..exceptions import InvalidKey, InvalidText, MalformedTag, NestingTooDeep, TrailingInput
from ..options import CodecOptions
from ..values import Struct
from .buffer import ByteReader, BytesLike
from .tags import TAG_TABLE, Kind


class Decoder:
    """Decodes bjson bytes according to a CodecOptions instance.

    Decoders hold no per-call state and can be shared between threads.
    """

    def __init__(self, options: Optional[CodecOptions] = None) -> None:
        self.options = options or CodecOptions()

    def decode(self, data: BytesLike) -> Any:
        """Decode exactly one value that spans all of ``data``.

        Raises:
            MalformedTag: If a tag byte is not in the tag table
            TruncatedInput: If a field, payload or body is cut short
            TrailingInput: If bytes remain after the value
            NestingTooDeep: If containers nest deeper than options.max_depth
        """
        reader = ByteReader(data)
        value = self._read_value(reader, 0)
        if not reader.exhausted():
            raise TrailingInput(reader.rest())
        return value

    def decode_one(self, data: BytesLike) -> Tuple[Any, bytes]:
        """Decode one value from the front of ``data``.

        Returns:
            Tuple of (value, remainder), the remainder being the bytes
            after the value, untouched
        """
        reader = ByteReader(data)
        value = self._read_value(reader, 0)
        return value, reader.rest()

    def _read_value(self, reader: ByteReader, depth: int) -> Any:
        offset = reader.position()
        tag = reader.read_tag()
        entry = TAG_TABLE[tag]
        if entry is None:
            raise MalformedTag(tag, offset)
        kind, width = entry

        if width is None:
            return self._read_fixed(reader, kind)

        n = reader.read_uint(width)
        if kind is Kind.UINT:
            return n
        if kind is Kind.NINT:
            return -n
        if kind is Kind.STRING:
            return self._read_string(reader, n, offset)

        if depth >= self.options.max_depth:
            raise NestingTooDeep(self.options.max_depth)
        body = reader.sub_reader(n)
        if kind is Kind.ARRAY:
            return self._read_array(body, depth + 1)
        return self._read_map(body, depth + 1)

    def _read_fixed(self, reader: ByteReader, kind: Kind) -> Any:
        if kind is Kind.NULL:
            return None
        if kind is Kind.FALSE:
            return False
        if kind is Kind.TRUE:
            return True
        if kind is Kind.EMPTY_STRING:
            return "" if self.options.text else b""
        if kind is Kind.FLOAT32:
            return reader.read_float32()
        return reader.read_float64()

    def _read_string(self, reader: ByteReader, length: int, offset: int) -> Any:
        raw = reader.read_bytes(length)
        if not self.options.text:
            return raw
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidText(f"string at offset {offset} is not valid UTF-8: {err}") from err

    def _read_array(self, body: ByteReader, depth: int) -> List[Any]:
        items = []
        while not body.exhausted():
            items.append(self._read_value(body, depth))
        return items

    def _read_map(self, body: ByteReader, depth: int) -> Any:
        pairs = []
        while not body.exhausted():
            # A body that ends between key and value fails in read_tag
            key = self._read_value(body, depth)
            pairs.append((key, self._read_value(body, depth)))
        if not self.options.struct_as_dict:
            return Struct(pairs)

        result: Dict[Any, Any] = {}
        for key, value in pairs:
            try:
                result[key] = value
            except TypeError as err:
                raise InvalidKey(f"map key of type {type(key).__name__} is unhashable") from err
        return result


def decode(data: BytesLike, options: Optional[CodecOptions] = None) -> Any:
    """Decode bjson bytes to a value tree.

    Examples:
        ```python
        from bjson import decode

        decode(b"\\x04\\x2a")              # 42
        decode(b"\\x0c\\x3f\\x80\\x00\\x00")  # 1.0, widened from float32
        ```
    """
    return Decoder(options).decode(data)


def decode_one(data: BytesLike, options: Optional[CodecOptions] = None) -> Tuple[Any, bytes]:
    """Decode the first value of ``data`` and return it with the remaining bytes."""
    return Decoder(options).decode_one(data)


__all__ = ["Decoder", "decode", "decode_one"]
