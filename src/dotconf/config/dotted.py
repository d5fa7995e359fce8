"""Dotted path helpers over nested dictionaries.

A path such as ``database.connections.mysql.host`` addresses a value four
dictionaries deep. Lookups stop at the first segment that is missing or that
lands on a non-dict value; they never raise.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, MutableMapping, Union

ConfigValue = Union[
    None, bool, int, float, str, List["ConfigValue"], Dict[str, "ConfigValue"]
]

_MISSING = object()


def split_path(path: str) -> List[str]:
    return path.split(".")


def _walk(items: Mapping[str, Any], path: str) -> Any:
    current: Any = items
    for segment in split_path(path):
        if not isinstance(current, dict) or segment not in current:
            return _MISSING
        current = current[segment]
    return current


def data_get(items: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Return the value at ``path`` or ``default`` when it does not resolve."""
    value = _walk(items, path)
    return default if value is _MISSING else value


def data_has(items: Mapping[str, Any], path: str) -> bool:
    """Return True when ``path`` resolves, even to None, False or empty."""
    return _walk(items, path) is not _MISSING


def data_set(items: MutableMapping[str, Any], path: str, value: Any) -> None:
    """Assign ``value`` at ``path``, creating intermediate dicts.

    Any intermediate value that is not a dict is replaced by an empty one.
    """
    *parents, last = split_path(path)
    current: MutableMapping[str, Any] = items
    for segment in parents:
        child = current.get(segment)
        if not isinstance(child, dict):
            child = {}
            current[segment] = child
        current = child
    current[last] = value


def merge_recursive(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> Dict[str, Any]:
    """Return ``base`` deep-merged with ``incoming``.

    Dicts present on both sides merge key by key; for anything else,
    lists included, the incoming value replaces the existing one.
    """
    merged = dict(base)
    for key, value in incoming.items():
        existing = merged.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            merged[key] = merge_recursive(existing, value)
        else:
            merged[key] = value
    return merged


__all__ = [
    "ConfigValue",
    "split_path",
    "data_get",
    "data_has",
    "data_set",
    "merge_recursive",
]
