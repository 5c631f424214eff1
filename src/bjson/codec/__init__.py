"""bjson codec.

This module provides the Codec facade plus module-level encode/decode
functions built on a default Codec.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from ..options import CodecOptions
from .buffer import ByteReader, BytesLike, ByteWriter
from .decoder import Decoder, decode, decode_one
from .encoder import Encoder, encode
from .tags import Kind, Width, classify, select_width


class Codec:
    """Encoder and decoder sharing one set of options.

    A Codec is immutable and safe to share across threads.

    Example:
        >>> codec = Codec(CodecOptions(text=False))
        >>> codec.decode(codec.encode(["hi", 1]))
        [b'hi', 1]
    """

    def __init__(self, options: Optional[CodecOptions] = None) -> None:
        self.options = options or CodecOptions()
        self._encoder = Encoder(self.options)
        self._decoder = Decoder(self.options)

    def encode(self, value: Any) -> bytes:
        """Encode a value tree to bytes."""
        return self._encoder.encode(value)

    def decode(self, data: BytesLike) -> Any:
        """Decode bytes holding exactly one value."""
        return self._decoder.decode(data)

    def decode_one(self, data: BytesLike) -> Tuple[Any, bytes]:
        """Decode the first value and return it with the remaining bytes."""
        return self._decoder.decode_one(data)


__all__ = [
    "Codec",
    "Encoder",
    "Decoder",
    "encode",
    "decode",
    "decode_one",
    "ByteReader",
    "ByteWriter",
    "Kind",
    "Width",
    "classify",
    "select_width",
]
