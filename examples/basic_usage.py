#!/usr/bin/env python3
"""Basic usage example for bjson.

This example demonstrates:
1. Building a value tree with an ordered map
2. Encoding to bjson
3. Decoding back, with default and custom options
4. Comparing the encoded size against JSON text
"""

from __future__ import annotations

from bjson import (
    CodecOptions,
    DecodeError,
    Struct,
    compression_ratio,
    decode,
    encode,
    json_size,
    size_breakdown,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("bjson Basic Usage Example")
    print("=" * 60)
    print()

    # Build a document; Struct keeps member order
    print("1. Building a document...")
    doc = Struct(
        [
            ("hello", "world"),
            ("double", 5.05),
            ("int", 42),
            ("neg_int", -300000),
            ("array", [1, 2000, 300000, "hello", None, True, False]),
        ]
    )
    for key, value in doc.items():
        print(f"   {key}: {value!r}")
    print()

    # Encode
    print("2. Encoding...")
    data = encode(doc)
    print(f"   {len(data)} bytes: {data.hex()}")
    for label, size in size_breakdown(doc):
        print(f"   {label:<12} {size:>3} bytes")
    print()

    # Decode
    print("3. Decoding...")
    decoded = decode(data)
    print(f"   Round-trip equal: {decoded == doc}")
    as_dict = decode(data, CodecOptions(text=False, struct_as_dict=True))
    print(f"   As dict with byte strings: {as_dict}")
    print()

    # Errors
    print("4. Rejecting malformed input...")
    for bad in (b"\xff", b"\x00\x00", b"\x10\x0ahi"):
        try:
            decode(bad)
        except DecodeError as e:
            print(f"   {bad!r}: {type(e).__name__}: {e}")
    print()

    # Size comparison
    print("5. Size vs JSON...")
    print(f"   JSON: {json_size(doc)} bytes, bjson: {len(data)} bytes")
    print(f"   Ratio: {compression_ratio(doc):.2f}x")


if __name__ == "__main__":
    main()
