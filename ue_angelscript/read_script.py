"""The read-script operation."""

import os
from typing import Any

from ue_angelscript.get_script_roots import get_script_roots
from ue_angelscript.messages import NO_SCRIPT_ROOTS, PROJECT_NOT_CONFIGURED
from ue_angelscript.read_file_with_lines import read_file_with_lines
from ue_angelscript.resolve_script_path import resolve_script_path
from ue_angelscript.workspace_config import WorkspaceConfig

HEADER_RULE = "=" * 60


def read_script(
    _settings: dict[str, Any],
    workspace: WorkspaceConfig,
    path: str,
    start_line: int | None = None,
    end_line: int | None = None,
) -> str:
    """Show a script file, optionally limited to a line range."""
    if not workspace.project_path:
        return PROJECT_NOT_CONFIGURED

    roots = get_script_roots(workspace)
    if not roots:
        return NO_SCRIPT_ROOTS

    resolved = resolve_script_path(path, roots)
    if resolved is None:
        listed = "\n".join(f"  - {r}" for r in roots)
        return (
            f"Error: File not found or access denied: {path}\n\n"
            f"The file must be within one of the configured script roots:\n{listed}"
        )

    try:
        content = read_file_with_lines(resolved.absolute_path, start_line, end_line)
    except OSError as e:
        return f"Error reading file: {e}"

    relative_path = os.path.relpath(resolved.absolute_path, resolved.root)
    return f"File: {relative_path.replace(os.sep, '/')}\n{HEADER_RULE}\n{content}"
