"""Recursive discovery of script files under the script roots."""

import logging
import os
import stat
from collections.abc import Iterable, Sequence

from ue_angelscript.script_file import ScriptFile

logger = logging.getLogger(__name__)

SCRIPT_EXTENSION = ".as"

# Build output, VCS metadata, dependency caches and IDE state.
SKIP_DIRS = frozenset(
    {
        "node_modules",
        ".git",
        "Intermediate",
        "Saved",
        "__pycache__",
        "Binaries",
        ".vscode",
        ".idea",
    }
)


def _log_walk_error(err: OSError) -> None:
    logger.warning("Failed to read directory %s: %s", err.filename, err)


def _scan_root(
    root: str, extension: str, skip_dirs: Iterable[str]
) -> list[ScriptFile]:
    """Walk a single root, pruning skipped directories."""
    skip = set(skip_dirs)
    found: list[ScriptFile] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames[:] = [d for d in dirnames if d not in skip]
        for name in filenames:
            if not name.endswith(extension):
                continue
            full_path = os.path.join(dirpath, name)
            try:
                st = os.stat(full_path)
            except OSError as e:
                logger.warning("Failed to stat file %s: %s", full_path, e)
                continue
            if not stat.S_ISREG(st.st_mode):
                logger.debug("Skipping non-regular file %s", full_path)
                continue
            relative_path = os.path.relpath(full_path, root).replace(os.sep, "/")
            found.append(
                ScriptFile(
                    absolute_path=full_path,
                    relative_path=relative_path,
                    root=root,
                    size=st.st_size,
                )
            )
    return found


def scan_for_scripts(
    roots: Sequence[str],
    *,
    extension: str = SCRIPT_EXTENSION,
    skip_dirs: Iterable[str] = SKIP_DIRS,
) -> list[ScriptFile]:
    """Recursively collect script files from every root.

    Roots that do not exist are skipped quietly and roots that are not
    directories are skipped with a warning. The result is sorted by
    relative path using plain code-point order; files sharing a relative
    path under different roots keep the order of their roots.
    """
    skip = frozenset(skip_dirs)
    results: list[tuple[str, int, ScriptFile]] = []

    for index, root in enumerate(roots):
        if not os.path.exists(root):
            logger.debug("Script root does not exist: %s", root)
            continue
        if not os.path.isdir(root):
            logger.warning("Script root is not a directory: %s", root)
            continue
        for script in _scan_root(root, extension, skip):
            results.append((script.relative_path, index, script))

    results.sort(key=lambda entry: (entry[0], entry[1]))
    return [script for _, _, script in results]
