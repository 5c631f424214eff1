"""JSON text adapter.

Converts between JSON text and bjson value trees. Objects become Struct so
member order and repeated member names survive the trip through bjson.
"""

from __future__ import annotations

import enum
import json
from typing import Any, List

from ..exceptions import UnsupportedValue
from ..values import Struct, iter_pairs, symbol_name


def from_json(text: str | bytes) -> Any:
    """Parse JSON text into a value tree.

    Objects are returned as Struct, arrays as list.

    Raises:
        ValueError: If ``text`` is not valid JSON
    """
    return json.loads(text, object_pairs_hook=Struct)


def to_json(value: Any, indent: int | None = None) -> str:
    """Render a value tree as JSON text.

    ``bytes`` strings must be UTF-8. Map keys that are not strings are
    rendered as the JSON text of the key, as ``json.dumps`` does for numbers.

    Raises:
        UnsupportedValue: If the tree holds something JSON cannot express
    """
    parts: List[str] = []
    _render(value, parts, indent, 0, "$")
    return "".join(parts)


def _render(value: Any, out: List[str], indent: int | None, level: int, path: str) -> None:
    if isinstance(value, enum.Enum):
        value = symbol_name(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError as err:
            raise UnsupportedValue(value, path) from err

    if value is None or isinstance(value, (bool, int, float, str)):
        out.append(json.dumps(value))
        return

    if isinstance(value, (list, tuple)):
        entries = []
        for i, item in enumerate(value):
            sub: List[str] = []
            _render(item, sub, indent, level + 1, f"{path}[{i}]")
            entries.append("".join(sub))
        _join(out, "[", "]", entries, indent, level)
        return

    if isinstance(value, (Struct, dict)):
        entries = []
        for key, item in iter_pairs(value):
            sub = [_key_text(key, path), ": " if indent is not None else ":"]
            _render(item, sub, indent, level + 1, f"{path}[{key!r}]")
            entries.append("".join(sub))
        _join(out, "{", "}", entries, indent, level)
        return

    raise UnsupportedValue(value, path)


def _key_text(key: Any, path: str) -> str:
    rendered: List[str] = []
    _render(key, rendered, None, 0, path)
    text = "".join(rendered)
    # Keys are emitted as JSON strings; string keys are already quoted
    if text.startswith('"'):
        return text
    return json.dumps(text)


def _join(
    out: List[str], open_: str, close: str, entries: List[str], indent: int | None, level: int
) -> None:
    if not entries:
        out.append(open_ + close)
        return
    if indent is None:
        out.append(open_ + ",".join(entries) + close)
        return
    pad = " " * (indent * (level + 1))
    out.append(open_ + "\n" + pad)
    out.append((",\n" + pad).join(entries))
    out.append("\n" + " " * (indent * level) + close)
