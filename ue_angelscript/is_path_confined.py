"""Lexical check that a path lies inside one of the script roots."""

import os
from collections.abc import Sequence


def _normalize(path: str) -> str:
    return os.path.normcase(os.path.normpath(path))


def is_within_root(path: str, root: str) -> bool:
    """Return True if ``path`` equals ``root`` or lies beneath it.

    A sibling that only shares a string prefix (``/proj/Script2`` against
    ``/proj/Script``) does not count: the remainder after the root must be
    empty or start with a separator.
    """
    norm_path = _normalize(path)
    norm_root = _normalize(root)
    if not norm_path.startswith(norm_root):
        return False
    if len(norm_path) == len(norm_root) or norm_root.endswith(os.sep):
        return True
    return norm_path[len(norm_root)] == os.sep


def is_path_confined(path: str, roots: Sequence[str]) -> bool:
    """Return True if ``path`` is confined to any of ``roots``.

    Symlinks are not resolved; the check is made on the normalized path.
    """
    return any(is_within_root(path, root) for root in roots)
