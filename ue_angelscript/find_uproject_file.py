"""Lookup of the .uproject file inside the project directory."""

import logging
from pathlib import Path

from ue_angelscript.find_project_root import UPROJECT_SUFFIX

logger = logging.getLogger(__name__)


def find_uproject_file(project_path: str | None) -> Path | None:
    """Return the first .uproject file (by name) in ``project_path``."""
    if not project_path:
        return None
    try:
        candidates = sorted(
            p for p in Path(project_path).iterdir() if p.name.endswith(UPROJECT_SUFFIX)
        )
    except OSError as e:
        logger.warning("Failed to read project directory %s: %s", project_path, e)
        return None
    return candidates[0] if candidates else None
