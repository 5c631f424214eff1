"""Utility functions for bjson.

This module provides size calculation and JSON text conversion.
"""

from __future__ import annotations

from .jsontext import from_json, to_json
from .sizing import compression_ratio, encoded_size, json_size, size_breakdown

__all__ = [
    # Sizing functions
    "encoded_size",
    "size_breakdown",
    "json_size",
    "compression_ratio",
    # JSON text
    "from_json",
    "to_json",
]
