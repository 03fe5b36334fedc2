"""The list-scripts operation."""

import logging
from typing import Any

from ue_angelscript.get_script_roots import get_script_roots
from ue_angelscript.matches_path_filter import matches_path_filter
from ue_angelscript.messages import PROJECT_NOT_CONFIGURED
from ue_angelscript.scan_for_scripts import scan_for_scripts
from ue_angelscript.scanner_options import scanner_options
from ue_angelscript.workspace_config import WorkspaceConfig

logger = logging.getLogger(__name__)


def list_scripts(
    settings: dict[str, Any],
    workspace: WorkspaceConfig,
    pattern: str | None = None,
    max_results: int | None = None,
) -> str:
    """List script files in the workspace, optionally filtered by path."""
    if not workspace.project_path:
        return PROJECT_NOT_CONFIGURED

    roots = get_script_roots(workspace)
    if not roots:
        return (
            "No script directories found. Expected Script/ or Scripts/ in "
            "project root, or configure UE_AS_EXTRA_SCRIPT_ROOTS."
        )

    limit = settings["listing"]["max_results"] if max_results is None else max_results

    logger.debug("Scanning script roots: %s", ", ".join(roots))
    files = scan_for_scripts(roots, **scanner_options(settings))
    if pattern:
        files = [f for f in files if matches_path_filter(f.relative_path, pattern)]

    total = len(files)
    shown = files[: max(0, limit)]

    matching = f" matching '{pattern}'" if pattern else ""
    lines = [
        f"Found {total} script file(s){matching}",
        f"Showing {len(shown)} result(s)\n",
    ]
    if not shown:
        lines.append("No matching files found.")
        return "\n".join(lines)

    lines.extend(f"{f.relative_path} ({f.size / 1024:.1f} KB)" for f in shown)
    if total > len(shown):
        lines.append(
            f"\n... and {total - len(shown)} more file(s). "
            "Increase max_results to see more."
        )
    return "\n".join(lines)
