"""Resolution of a user-supplied script path against the script roots."""

import os
from collections.abc import Sequence

from ue_angelscript.is_path_confined import is_within_root
from ue_angelscript.resolved_path import ResolvedPath


def resolve_script_path(candidate: str, roots: Sequence[str]) -> ResolvedPath | None:
    """Resolve a relative or absolute path to an existing file inside a root.

    Absolute paths are accepted only if they are confined to a root; the
    first confining root (in order) is reported. Relative paths are joined
    to each root in turn and the first existing, still-confined file wins.
    Traversal segments that leave the root are rejected rather than
    followed into another root.

    Returns None both for missing files and for paths outside every root.
    """
    if os.path.isabs(candidate):
        absolute_path = os.path.normpath(candidate)
        for root in roots:
            if is_within_root(absolute_path, root):
                if os.path.isfile(absolute_path):
                    return ResolvedPath(absolute_path=absolute_path, root=root)
                return None
        return None

    for root in roots:
        absolute_path = os.path.normpath(os.path.join(root, candidate))
        if is_within_root(absolute_path, root) and os.path.isfile(absolute_path):
            return ResolvedPath(absolute_path=absolute_path, root=root)
    return None
