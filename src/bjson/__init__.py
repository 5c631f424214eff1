"""bjson: Binary JSON Codec

A Python library for the bjson wire format: a compact, self-describing binary
encoding of JSON-equivalent value trees (null, booleans, integers, floats,
strings, ordered arrays and ordered key/value maps).

Key Features:
- Byte-for-byte compatible with other bjson implementations
- Minimal width selection for integers, string lengths and container bodies
- Ordered maps with arbitrary keys (Struct), preserving duplicates
- Pure Python implementation, no shared state between calls

Quick Start:
    >>> from bjson import Struct, decode, encode
    >>>
    >>> doc = Struct([("hello", "world"), ("int", 42), ("array", [1, 2000, None])])
    >>> data = encode(doc)
    >>> decode(data) == doc
    True

See http://bjson.org/ for the format description.
"""

from __future__ import annotations

from .codec import Codec, decode, decode_one, encode
from .exceptions import (
    BjsonError,
    DecodeError,
    EncodeError,
    InvalidKey,
    InvalidText,
    MalformedTag,
    NestingTooDeep,
    TrailingInput,
    TruncatedInput,
    UnsupportedValue,
    ValueTooLarge,
)
from .options import CodecOptions
from .utils import compression_ratio, encoded_size, from_json, json_size, size_breakdown, to_json
from .values import Struct

__version__ = "1.0.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_one",
    "Codec",
    "CodecOptions",
    "Struct",
    # Exceptions
    "BjsonError",
    "EncodeError",
    "DecodeError",
    "ValueTooLarge",
    "UnsupportedValue",
    "MalformedTag",
    "TruncatedInput",
    "TrailingInput",
    "InvalidText",
    "InvalidKey",
    "NestingTooDeep",
    # Sizing
    "encoded_size",
    "size_breakdown",
    "json_size",
    "compression_ratio",
    # JSON text
    "from_json",
    "to_json",
    # Version
    "__version__",
]
