"""Computation of the ordered script root set for a workspace."""

import os

from ue_angelscript.workspace_config import WorkspaceConfig

GAME_SCRIPT_DIRS = ("Script", "Scripts")
ENGINE_SCRIPT_DIRS = ("Script-Examples", "Script", "Scripts")


def get_script_roots(config: WorkspaceConfig) -> list[str]:
    """Return extra roots first, then the project's default script dirs."""
    roots = list(config.extra_script_roots)
    if config.project_path:
        dirs = ENGINE_SCRIPT_DIRS if config.is_engine_tree else GAME_SCRIPT_DIRS
        roots.extend(os.path.join(config.project_path, d) for d in dirs)
    return roots
