"""Value model helpers.

bjson maps are ordered association lists, not lookup tables: keys may be any
value, duplicates are allowed and pair order is significant. A plain dict
cannot hold that (list keys, repeated keys), so maps decode to Struct.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple, Union

from .exceptions import UnsupportedValue

Pair = Tuple[Any, Any]


@dataclass
class Struct:
    """Ordered sequence of (key, value) pairs, the wire analogue of a JSON object.

    Example:
        >>> doc = Struct([("hello", "world"), ("int", 42)])
        >>> doc.get("int")
        42
        >>> list(doc.keys())
        ['hello', 'int']
    """

    pairs: List[Pair] = field(default_factory=list)

    def __post_init__(self) -> None:
        pairs = []
        for i, pair in enumerate(self.pairs):
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise UnsupportedValue(pair, f"$<{i}>")
            pairs.append((pair[0], pair[1]))
        self.pairs = pairs

    @classmethod
    def from_dict(cls, mapping: Mapping[Any, Any]) -> Struct:
        """Build a Struct from a mapping, keeping its iteration order."""
        return cls(list(mapping.items()))

    def append(self, key: Any, value: Any) -> None:
        """Add a pair at the end, even if ``key`` is already present."""
        self.pairs.append((key, value))

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value of the first pair whose key equals ``key``."""
        for k, v in self.pairs:
            if k == key:
                return v
        return default

    def items(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def keys(self) -> Iterator[Any]:
        return (k for k, _ in self.pairs)

    def values(self) -> Iterator[Any]:
        return (v for _, v in self.pairs)

    def to_dict(self) -> Dict[Any, Any]:
        """Collapse into a dict; later duplicates overwrite earlier ones."""
        return dict(self.pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


def symbol_name(value: enum.Enum) -> str:
    """Canonicalize a symbolic name to the string it is encoded as.

    Enum members stand in for interned names: they have no wire form of
    their own and are sent as the text of their member name.
    """
    return value.name


MapLike = Union[Struct, Mapping[Any, Any]]


def iter_pairs(value: MapLike) -> Iterable[Any]:
    """Iterate the pairs of a Struct or the items of a mapping, in order."""
    if isinstance(value, Struct):
        return value.pairs
    return value.items()
