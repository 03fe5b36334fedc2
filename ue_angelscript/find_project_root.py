"""Detection of Unreal project and engine roots on disk."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

UPROJECT_SUFFIX = ".uproject"


def is_engine_root(directory: Path) -> bool:
    """Return True if ``directory`` is an engine source tree with Angelscript."""
    return (directory / "Engine" / "Plugins" / "Angelscript").exists()


def has_uproject(directory: Path) -> bool:
    """Return True if ``directory`` directly contains a .uproject file."""
    try:
        return any(p.name.endswith(UPROJECT_SUFFIX) for p in directory.iterdir())
    except OSError:
        return False


def find_project_root(start_dir: Path) -> tuple[Path, bool] | None:
    """Walk upward from ``start_dir`` looking for a project or engine tree.

    Returns ``(root, is_engine_tree)``. A game project (.uproject) anywhere
    on the way up wins over an engine tree passed earlier.
    """
    directory = start_dir.resolve()
    engine_candidate: Path | None = None

    for candidate in (directory, *directory.parents):
        if candidate.parent == candidate:
            break  # filesystem root is never a project
        if has_uproject(candidate):
            return candidate, False
        if engine_candidate is None and is_engine_root(candidate):
            engine_candidate = candidate

    if engine_candidate is not None:
        logger.debug("Using engine source tree at %s", engine_candidate)
        return engine_candidate, True
    return None
