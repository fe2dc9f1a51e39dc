"""JSON encoding of linked maps and sets that keeps insertion order."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from linkedtable.linkedmap import LinkedHashMap
from linkedtable.linkedset import LinkedHashSet

_COMPACT = (",", ":")


def map_to_json(mapping: Mapping) -> str:
    """Encode *mapping* as a JSON object with keys in iteration order."""
    return json.dumps(dict(mapping.items()), separators=_COMPACT)


def map_from_json(text: str) -> LinkedHashMap:
    """Decode a JSON object into a map whose order follows the document."""
    data: Any = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return LinkedHashMap(data.items(), capacity=len(data))


def set_to_json(items: Iterable) -> str:
    """Encode *items* as a JSON array in iteration order."""
    return json.dumps(list(items), separators=_COMPACT)


def set_from_json(text: str) -> LinkedHashSet:
    """Decode a JSON array into a set whose order follows the document."""
    data: Any = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array")
    return LinkedHashSet(data, capacity=len(data))