"""Codec configuration.

CodecOptions is a frozen Pydantic model so an options instance can be shared
between threads and validated once at construction.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_DEPTH = 256
# Decoding recurses twice per nesting level; keep well under the interpreter limit
MAX_DEPTH_LIMIT = 400


class CodecOptions(BaseModel):
    """Options controlling how values are encoded and decoded.

    The wire format itself is not configurable: two codecs with different
    options produce identical bytes for the same value tree.

    Example:
        >>> from bjson import CodecOptions, decode
        >>> opts = CodecOptions(text=False, struct_as_dict=True)
        >>> decode(b"\\x24\\x04\\x10\\x01k\\x03", opts)
        {b'k': True}

    Attributes:
        max_depth: Deepest array/map nesting accepted by encode and decode (1-400)
        text: Decode strings as UTF-8 ``str`` (True) or leave them as ``bytes``
        struct_as_dict: Decode maps to ``dict`` instead of Struct
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
    )

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1, le=MAX_DEPTH_LIMIT)
    text: bool = True
    struct_as_dict: bool = False
