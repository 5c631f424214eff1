"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from bjson import Struct

# Reference document and its encoding, shared with other bjson implementations.
REFERENCE_ENCODED = bytes(
    [36, 81]  # map, less than 256 bytes
    + [16, 5, *b"hello"]
    + [16, 5, *b"world"]
    + [16, 6, *b"double"]
    + [13, 64, 20, 51, 51, 51, 51, 51, 51]  # 5.05
    + [16, 3, *b"int"]
    + [4, 42]
    + [16, 7, *b"neg_int"]
    + [10, 0, 4, 147, 224]  # -300000
    + [16, 5, *b"array"]
    + [32, 20]  # array, less than 256 bytes
    + [4, 1]
    + [5, 7, 208]  # 2000
    + [6, 0, 4, 147, 224]  # 300000
    + [16, 5, *b"hello"]
    + [0, 3, 1]  # null, true, false
)

# Same document plus a single-precision float, which only ever arrives from
# other implementations.
REFERENCE_WITH_FLOAT32 = bytes(
    [36, 93]
    + [16, 5, *b"hello"]
    + [16, 5, *b"world"]
    + [16, 6, *b"double"]
    + [13, 64, 20, 51, 51, 51, 51, 51, 51]
    + [16, 3, *b"int"]
    + [4, 42]
    + [16, 7, *b"neg_int"]
    + [10, 0, 4, 147, 224]
    + [16, 5, *b"float"]
    + [12, 63, 128, 0, 0]  # 1.0 as float32
    + [16, 5, *b"array"]
    + [32, 20]
    + [4, 1]
    + [5, 7, 208]
    + [6, 0, 4, 147, 224]
    + [16, 5, *b"hello"]
    + [0, 3, 1]
)


@pytest.fixture
def reference_array() -> list:
    """Array used throughout the reference vectors."""
    return [1, 2000, 300000, "hello", None, True, False]


@pytest.fixture
def reference_doc(reference_array: list) -> Struct:
    """Value tree matching REFERENCE_ENCODED."""
    return Struct(
        [
            ("hello", "world"),
            ("double", 5.05),
            ("int", 42),
            ("neg_int", -300000),
            ("array", reference_array),
        ]
    )


@pytest.fixture
def reference_encoded() -> bytes:
    """Encoding of reference_doc."""
    return REFERENCE_ENCODED


@pytest.fixture
def reference_with_float32() -> bytes:
    """Reference document with an extra float32 member."""
    return REFERENCE_WITH_FLOAT32


def nested_arrays(depth: int) -> bytes:
    """Encode ``depth`` arrays nested inside each other, 64-bit length fields."""
    data = b""
    for _ in range(depth):
        data = bytes([35]) + len(data).to_bytes(8, "big") + data
    return data


@pytest.fixture
def deeply_nested() -> bytes:
    """Hostile input: 3000 levels of array nesting."""
    return nested_arrays(3000)
