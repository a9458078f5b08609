"""
Helpers for nested option mappings.

Responsibility: Merge user overrides into defaults and read dotted field paths
"""

from __future__ import annotations

from typing import Any, Mapping


def deep_merge(base: Mapping[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """
    Merge overrides into a copy of base.

    Nested mappings are merged key by key; any other value in overrides
    replaces the value in base.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def get_dotted(source: Any, dotted_path: str, default: Any = None) -> Any:
    """
    Read a value by dotted path from nested mappings or attributes.

    Example:
        >>> get_dotted({"fields": {"date": "2023-01-01"}}, "fields.date")
        '2023-01-01'
    """
    value = source
    for part in dotted_path.split("."):
        if value is None:
            return default
        if isinstance(value, Mapping):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return default if value is None else value
