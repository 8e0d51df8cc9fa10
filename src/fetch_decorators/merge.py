"""Left-priority deep merge of option mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_deep_left(left: Mapping[str, Any], right: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings without mutating either.

    Values from ``left`` win on conflicting keys. Only when both sides hold a
    ``dict`` for the same key are the two merged recursively with the same
    rule. Lists and every other value are taken whole from ``left``.

    Example:
        >>> merge_deep_left({"a": 1, "h": {"x": 1}}, {"a": 2, "h": {"y": 2}})
        {'a': 1, 'h': {'x': 1, 'y': 2}}
    """
    merged: dict[str, Any] = {}
    for key, value in left.items():
        if key in right and isinstance(value, dict) and isinstance(right[key], dict):
            merged[key] = merge_deep_left(value, right[key])
        else:
            merged[key] = value
    for key, value in right.items():
        if key not in merged:
            merged[key] = value
    return merged
