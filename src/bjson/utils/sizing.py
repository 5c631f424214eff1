"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a value tree
without actually encoding it, and to compare it against compact JSON text.
"""

from __future__ import annotations

import enum
from typing import Any, List, Tuple

from ..codec.tags import select_width
from ..exceptions import UnsupportedValue
from ..values import Struct, iter_pairs, symbol_name
from .jsontext import to_json


def encoded_size(value: Any) -> int:
    """Calculate the encoded size of a value tree in bytes.

    The result always equals ``len(encode(value))``.

    Args:
        value: Value tree to measure

    Returns:
        Size in bytes

    Raises:
        ValueTooLarge: If an integer magnitude or a length is >= 2**64
        UnsupportedValue: If the tree holds a value outside the model

    Example:
        >>> encoded_size(42)
        2  # tag + 8-bit magnitude
        >>> encoded_size([1, 2000])
        7  # tag + length + (1 + 1) + (1 + 2)
    """
    return _size(value, "$")


def size_breakdown(value: Any) -> List[Tuple[str, int]]:
    """Get the encoded size of each top-level entry of an array or map.

    For arrays the label is the element index; for maps it is the key's
    repr and the size covers the encoded key plus the encoded value.
    Scalars yield a single ``("$", size)`` entry.

    Example:
        >>> size_breakdown(Struct([("int", 42)]))
        [("'int'", 7)]
    """
    if isinstance(value, (list, tuple)):
        return [(str(i), _size(item, f"$[{i}]")) for i, item in enumerate(value)]
    if isinstance(value, (Struct, dict)):
        return [
            (repr(key), _size(key, "$") + _size(item, f"$[{key!r}]"))
            for key, item in iter_pairs(value)
        ]
    return [("$", _size(value, "$"))]


def json_size(value: Any) -> int:
    """Size in bytes of the compact UTF-8 JSON text for ``value``."""
    return len(to_json(value).encode("utf-8"))


def compression_ratio(value: Any) -> float:
    """Ratio of compact JSON size to encoded size (>1 means bjson is smaller)."""
    return json_size(value) / encoded_size(value)


def _sized(n: int, what: str) -> int:
    # tag + length/magnitude field
    return 1 + select_width(n, what).value


def _string_size(raw: bytes) -> int:
    if not raw:
        return 1
    return _sized(len(raw), "string length") + len(raw)


def _size(value: Any, path: str) -> int:
    if value is None or isinstance(value, bool):
        return 1
    if isinstance(value, enum.Enum):
        return _string_size(symbol_name(value).encode("utf-8"))
    if isinstance(value, int):
        return _sized(abs(value), "integer")
    if isinstance(value, float):
        return 9
    if isinstance(value, str):
        try:
            return _string_size(value.encode("utf-8"))
        except UnicodeEncodeError as err:
            raise UnsupportedValue(value, path) from err
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _string_size(bytes(value))
    if isinstance(value, (list, tuple)):
        body = sum(_size(item, f"{path}[{i}]") for i, item in enumerate(value))
        return _sized(body, "array length") + body
    if isinstance(value, (Struct, dict)):
        body = 0
        for i, pair in enumerate(iter_pairs(value)):
            if not isinstance(pair, tuple) or len(pair) != 2:
                raise UnsupportedValue(pair, f"{path}<{i}>")
            key, item = pair
            body += _size(key, f"{path}<{i}>") + _size(item, f"{path}[{key!r}]")
        return _sized(body, "map length") + body
    raise UnsupportedValue(value, path)
