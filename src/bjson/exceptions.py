"""Exception hierarchy for bjson.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BjsonError for easy catching of any bjson-specific error.
"""

from __future__ import annotations


class BjsonError(Exception):
    """Base exception for all bjson errors."""

    pass


class EncodeError(BjsonError):
    """Raised when encoding a value tree fails.

    Examples:
        - Integer magnitude does not fit in 64 bits
        - String or container payload length does not fit in 64 bits
        - Value of a type outside the bjson value model
    """

    pass


class DecodeError(BjsonError):
    """Raised when decoding binary data fails.

    Examples:
        - Unknown tag byte
        - Truncated data (insufficient bytes)
        - Unconsumed bytes after a complete top-level value
    """

    pass


class ValueTooLarge(EncodeError):
    """Raised when a magnitude or byte length is >= 2**64."""

    def __init__(self, value: int, what: str = "value") -> None:
        super().__init__(f"{what} {value} does not fit in 64 bits")
        self.value = value


class UnsupportedValue(EncodeError):
    """Raised when encode is given a value outside the bjson value model.

    Examples:
        - set, frozenset, complex
        - arbitrary objects
        - dict/Struct pairs that are not 2-tuples
    """

    def __init__(self, value: object, path: str = "$") -> None:
        super().__init__(f"unsupported value of type {type(value).__name__} at {path}")
        self.value = value
        self.path = path


class MalformedTag(DecodeError):
    """Raised when a tag byte is not in the tag table."""

    def __init__(self, tag: int, offset: int) -> None:
        super().__init__(f"malformed tag {tag} at offset {offset}")
        self.tag = tag
        self.offset = offset


class TruncatedInput(DecodeError):
    """Raised when a read needs more bytes than are available.

    Covers fixed-width fields, length fields, string payloads and container
    bodies, including a container child that would run past the end of its
    declared body.
    """

    def __init__(self, offset: int, needed: int, available: int) -> None:
        super().__init__(
            f"truncated input at offset {offset}: need {needed} bytes, have {available}"
        )
        self.offset = offset
        self.needed = needed
        self.available = available


class TrailingInput(DecodeError):
    """Raised when top-level decode leaves unconsumed bytes."""

    def __init__(self, remainder: bytes) -> None:
        super().__init__(f"{len(remainder)} trailing bytes after value")
        self.remainder = remainder


class InvalidText(DecodeError):
    """Raised when a string payload is not valid UTF-8 in text mode."""

    pass


class InvalidKey(DecodeError):
    """Raised when a map key cannot be used as a dict key."""

    pass


class NestingTooDeep(EncodeError, DecodeError):
    """Raised when arrays/maps nest deeper than the configured max_depth.

    Raised by both encode and decode, so it is both an EncodeError and a
    DecodeError.
    """

    def __init__(self, max_depth: int) -> None:
        super().__init__(f"nesting exceeds max_depth={max_depth}")
        self.max_depth = max_depth
