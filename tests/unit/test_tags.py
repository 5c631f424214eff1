"""Unit tests for the tag table."""

from __future__ import annotations

import pytest

from bjson import ValueTooLarge
from bjson.codec.tags import (
    TAG_ARRAY,
    TAG_MAP,
    TAG_NINT,
    TAG_STRING,
    TAG_TABLE,
    TAG_UINT,
    Kind,
    Width,
    classify,
    family_tag,
    select_width,
)


class TestSelectWidth:
    """Test width class selection."""

    @pytest.mark.parametrize(
        "n,width",
        [
            (0, Width.W8),
            (255, Width.W8),
            (256, Width.W16),
            (65535, Width.W16),
            (65536, Width.W32),
            (2**32 - 1, Width.W32),
            (2**32, Width.W64),
            (2**64 - 1, Width.W64),
        ],
    )
    def test_boundaries(self, n: int, width: Width) -> None:
        """Test each width boundary picks the smallest class."""
        assert select_width(n) is width

    def test_too_large(self) -> None:
        """Test 2**64 does not fit any width."""
        with pytest.raises(ValueTooLarge, match="string length"):
            select_width(2**64, "string length")


class TestClassify:
    """Test tag lookups."""

    def test_fixed_tags(self) -> None:
        """Test constant and float tags have no width."""
        assert classify(0) == (Kind.NULL, None)
        assert classify(1) == (Kind.FALSE, None)
        assert classify(2) == (Kind.EMPTY_STRING, None)
        assert classify(3) == (Kind.TRUE, None)
        assert classify(12) == (Kind.FLOAT32, None)
        assert classify(13) == (Kind.FLOAT64, None)

    @pytest.mark.parametrize(
        "base,kind",
        [
            (TAG_UINT, Kind.UINT),
            (TAG_NINT, Kind.NINT),
            (TAG_STRING, Kind.STRING),
            (TAG_ARRAY, Kind.ARRAY),
            (TAG_MAP, Kind.MAP),
        ],
    )
    def test_families(self, base: int, kind: Kind) -> None:
        """Test each family covers four consecutive tags."""
        for width in Width:
            tag = family_tag(base, width)
            assert tag == base + width.index
            assert classify(tag) == (kind, width)

    @pytest.mark.parametrize("tag", [14, 15, 20, 21, 22, 23, 24, 31, 40, 255])
    def test_unknown_tags(self, tag: int) -> None:
        """Test reserved and unassigned tags are rejected."""
        assert classify(tag) is None

    def test_table_covers_all_bytes(self) -> None:
        """Test the lookup table agrees with classify for every byte."""
        assert len(TAG_TABLE) == 256
        assert sum(entry is not None for entry in TAG_TABLE) == 26
        assert all(TAG_TABLE[tag] == classify(tag) for tag in range(256))
