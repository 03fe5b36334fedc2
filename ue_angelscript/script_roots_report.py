"""The script-roots operation: ask the editor, fall back to configuration."""

import logging
import os
from dataclasses import dataclass
from typing import Any

from ue_angelscript.find_uproject_file import find_uproject_file
from ue_angelscript.get_script_roots import get_script_roots
from ue_angelscript.messages import exists_mark
from ue_angelscript.run_commandlet import run_commandlet
from ue_angelscript.workspace_config import WorkspaceConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScriptRoot:
    """A script root and where it was learned from."""

    path: str
    exists: bool
    source: str  # "commandlet" or "config"


def parse_roots_output(stdout: str) -> list[str]:
    """Extract absolute root paths from the roots commandlet's stdout.

    One path per line; editor log lines (``Log...``) and anything that is
    not an absolute path are ignored.
    """
    roots = []
    for raw in stdout.split("\n"):
        line = raw.strip()
        if line and not line.startswith("Log") and os.path.isabs(line):
            roots.append(line)
    return roots


def discover_script_roots(
    settings: dict[str, Any], workspace: WorkspaceConfig
) -> list[ScriptRoot]:
    """Return roots reported by the editor, or the configured ones."""
    if workspace.editor_cmd and workspace.project_path:
        uproject = find_uproject_file(workspace.project_path)
        if uproject is not None and os.path.exists(workspace.editor_cmd):
            logger.debug("Attempting to get script roots from the roots commandlet")
            commandlet = settings["commandlet"]
            result = run_commandlet(
                workspace.editor_cmd,
                str(uproject),
                commandlet["roots_name"],
                [],
                commandlet["roots_timeout_seconds"],
                max_output_bytes=commandlet["max_output_bytes"],
            )
            if result.passed and result.stdout:
                paths = parse_roots_output(result.stdout)
                if paths:
                    logger.debug("Got %d script roots from commandlet", len(paths))
                    return [
                        ScriptRoot(p, os.path.exists(p), "commandlet") for p in paths
                    ]
            logger.debug(
                "Roots commandlet gave no usable output (exit code %s)",
                result.exit_code,
            )

    logger.debug("Using config-based script root discovery")
    return [
        ScriptRoot(p, os.path.exists(p), "config") for p in get_script_roots(workspace)
    ]


def script_roots_report(settings: dict[str, Any], workspace: WorkspaceConfig) -> str:
    """Render the script root directories with their existence and source."""
    roots = discover_script_roots(settings, workspace)

    out = "Script Root Directories:\n\n"
    if not roots:
        out += "No script roots found.\n"
        if not workspace.project_path:
            out += (
                "\nNote: Project path not configured. Set UE_AS_PROJECT_PATH "
                "to enable automatic discovery.\n"
            )
        return out

    for root in roots:
        out += f"{exists_mark(root.exists)} {root.path} ({root.source})\n"
    existing = sum(1 for r in roots if r.exists)
    out += f"\nTotal: {len(roots)} roots ({existing} exist on disk)\n"
    return out
