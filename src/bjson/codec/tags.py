"""Tag table for the bjson wire format.

Every encoded value starts with one tag byte naming its category and, for
sized categories, the width class of the field that follows. Sized
categories occupy four consecutive tags, one per width class (8/16/32/64
bits), so the concrete tag is always ``base + width index``.

    0        null
    1        false
    2        empty string
    3        true
    4-7      non-negative integer, big-endian unsigned
    8-11     negative integer, big-endian unsigned magnitude
    12       float32 (decode only)
    13       float64
    16-19    string, length field + raw bytes
    20-23    reserved
    32-35    array, body length field + encoded elements
    36-39    map, body length field + encoded key/value pairs
"""

from __future__ import annotations

import enum
from typing import Optional, Tuple

from ..exceptions import ValueTooLarge

TAG_NULL = 0
TAG_FALSE = 1
TAG_EMPTY_STRING = 2
TAG_TRUE = 3
TAG_UINT = 4
TAG_NINT = 8
TAG_FLOAT32 = 12
TAG_FLOAT64 = 13
TAG_STRING = 16
TAG_ARRAY = 32
TAG_MAP = 36


class Width(enum.IntEnum):
    """Width classes, valued in bytes."""

    W8 = 1
    W16 = 2
    W32 = 4
    W64 = 8

    @property
    def index(self) -> int:
        """Offset of this width within a four-tag family."""
        return WIDTHS.index(self)

    @property
    def limit(self) -> int:
        """Exclusive upper bound of values representable in this width."""
        return 1 << (8 * self.value)


WIDTHS: Tuple[Width, ...] = (Width.W8, Width.W16, Width.W32, Width.W64)


class Kind(enum.Enum):
    """Semantic category of a tag."""

    NULL = "null"
    FALSE = "false"
    EMPTY_STRING = "empty string"
    TRUE = "true"
    UINT = "uint"
    NINT = "nint"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STRING = "string"
    ARRAY = "array"
    MAP = "map"


_FIXED = {
    TAG_NULL: Kind.NULL,
    TAG_FALSE: Kind.FALSE,
    TAG_EMPTY_STRING: Kind.EMPTY_STRING,
    TAG_TRUE: Kind.TRUE,
    TAG_FLOAT32: Kind.FLOAT32,
    TAG_FLOAT64: Kind.FLOAT64,
}

_FAMILIES = {
    TAG_UINT: Kind.UINT,
    TAG_NINT: Kind.NINT,
    TAG_STRING: Kind.STRING,
    TAG_ARRAY: Kind.ARRAY,
    TAG_MAP: Kind.MAP,
}


def select_width(n: int, what: str = "value") -> Width:
    """Pick the smallest width class that can hold ``n``.

    Used for integer magnitudes, string byte lengths and container body
    lengths alike.

    Args:
        n: Non-negative magnitude or length
        what: Description used in the error message

    Returns:
        Smallest Width with ``n < 2 ** (8 * width)``

    Raises:
        ValueTooLarge: If ``n >= 2 ** 64``
    """
    for width in WIDTHS:
        if n < width.limit:
            return width
    raise ValueTooLarge(n, what)


def family_tag(base: int, width: Width) -> int:
    """Return the concrete tag for a sized family and width."""
    return base + width.index


def classify(tag: int) -> Optional[Tuple[Kind, Optional[Width]]]:
    """Map a tag byte to its (kind, width), or None if the tag is unknown.

    Fixed tags report a width of None.
    """
    if tag in _FIXED:
        return _FIXED[tag], None
    base = tag & ~0x03
    kind = _FAMILIES.get(base)
    if kind is None:
        return None
    return kind, WIDTHS[tag - base]


# Full 256-entry lookup so the decoder dispatches with a single index.
TAG_TABLE: Tuple[Optional[Tuple[Kind, Optional[Width]]], ...] = tuple(
    classify(tag) for tag in range(256)
)
