"""Workspace configuration from environment variables and auto-detection."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ue_angelscript.find_editor_cmd import find_editor_cmd
from ue_angelscript.find_project_root import find_project_root, is_engine_root

logger = logging.getLogger(__name__)

PROJECT_PATH_ENV_VAR = "UE_AS_PROJECT_PATH"
EDITOR_CMD_ENV_VAR = "UE_AS_EDITOR_CMD"
EXTRA_ROOTS_ENV_VAR = "UE_AS_EXTRA_SCRIPT_ROOTS"

# Semicolons, so Windows drive letters survive the split.
EXTRA_ROOTS_SEPARATOR = ";"


@dataclass(frozen=True)
class WorkspaceConfig:
    """Where the project, its editor binary and extra script roots live."""

    project_path: str | None = None
    editor_cmd: str | None = None
    extra_script_roots: list[str] = field(default_factory=list)
    is_engine_tree: bool = False


def _absolute(path: str, cwd: Path) -> str:
    return os.path.normpath(os.path.join(cwd, os.path.expanduser(path)))


def parse_extra_roots(value: str | None, cwd: Path) -> list[str]:
    """Split a ``;``-separated root list into absolute paths."""
    if not value:
        return []
    return [
        _absolute(part.strip(), cwd)
        for part in value.split(EXTRA_ROOTS_SEPARATOR)
        if part.strip()
    ]


def load_workspace_config(
    environ: Mapping[str, str] | None = None, cwd: Path | None = None
) -> WorkspaceConfig:
    """Build the workspace configuration.

    Explicit environment variables win; otherwise the project is detected by
    walking up from ``cwd`` and the editor binary is probed next to it.
    """
    env = os.environ if environ is None else environ
    cwd = Path.cwd() if cwd is None else cwd

    project_path: str | None = None
    is_engine_tree = False
    if env.get(PROJECT_PATH_ENV_VAR):
        project_path = _absolute(env[PROJECT_PATH_ENV_VAR], cwd)
        is_engine_tree = is_engine_root(Path(project_path))
    else:
        detected = find_project_root(cwd)
        if detected is not None:
            root, is_engine_tree = detected
            project_path = str(root)
            logger.debug("Detected project root %s", project_path)

    editor_cmd: str | None = None
    if env.get(EDITOR_CMD_ENV_VAR):
        editor_cmd = _absolute(env[EDITOR_CMD_ENV_VAR], cwd)
    elif project_path:
        found = find_editor_cmd(Path(project_path))
        editor_cmd = str(found) if found is not None else None

    return WorkspaceConfig(
        project_path=project_path,
        editor_cmd=editor_cmd,
        extra_script_roots=parse_extra_roots(env.get(EXTRA_ROOTS_ENV_VAR), cwd),
        is_engine_tree=is_engine_tree,
    )
