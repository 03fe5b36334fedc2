"""Overlay of user settings onto the default settings tree."""

from typing import Any

# User files may add pruned directory names, never remove the defaults.
SKIP_DIRS_KEY = "skip_dirs"


def _union(defaults: list[Any], extra: list[Any]) -> list[Any]:
    return sorted({*defaults, *extra})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` overlaid with ``update``; neither input is modified.

    Nested sections merge key by key and other values (lists included) are
    replaced, except ``skip_dirs``, whose entries are unioned with the base.
    """
    merged = dict(base)
    for key, value in update.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value)
        elif key == SKIP_DIRS_KEY and isinstance(current, list) and (
            value is None or isinstance(value, list)
        ):
            merged[key] = _union(current, value or [])
        else:
            merged[key] = value
    return merged
