"""The project-info operation: configuration, roots, counts, capabilities."""

import logging
import os
from collections import Counter
from dataclasses import dataclass
from typing import Any

from ue_angelscript.find_uproject_file import find_uproject_file
from ue_angelscript.get_script_roots import get_script_roots
from ue_angelscript.messages import exists_mark
from ue_angelscript.scan_for_scripts import scan_for_scripts
from ue_angelscript.scanner_options import scanner_options
from ue_angelscript.workspace_config import WorkspaceConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Capability:
    """An operation and whether the current workspace supports it."""

    name: str
    available: bool
    reason: str | None = None


def _configuration_section(workspace: WorkspaceConfig, uproject_name: str | None) -> str:
    out = "Configuration:\n--------------\n"
    if workspace.project_path:
        found = os.path.exists(workspace.project_path)
        mark = exists_mark(found) + ("" if found else " (not found)")
        out += f"Project Path: {workspace.project_path} {mark}\n"
    else:
        out += "Project Path: Not configured (set UE_AS_PROJECT_PATH)\n"

    if workspace.editor_cmd:
        found = os.path.exists(workspace.editor_cmd)
        mark = exists_mark(found) + ("" if found else " (not found)")
        out += f"Editor Binary: {workspace.editor_cmd} {mark}\n"
    else:
        out += "Editor Binary: Not configured (set UE_AS_EDITOR_CMD)\n"

    if uproject_name:
        out += f"Project File: {uproject_name}\n"
    elif workspace.project_path:
        out += "Project File: No .uproject file found\n"
    return out + "\n"


def _roots_section(workspace: WorkspaceConfig, roots: list[str]) -> str:
    out = "Script Roots:\n-------------\n"
    if not roots:
        return out + "No script roots configured\n\n"

    extra = set(workspace.extra_script_roots)
    default_roots = [r for r in roots if r not in extra]
    extra_roots = [r for r in roots if r in extra]

    if default_roots:
        out += "Default directories:\n"
        for root in default_roots:
            mark = exists_mark(os.path.exists(root))
            out += f"  {mark} {os.path.basename(root)}/ ({root})\n"
    if extra_roots:
        out += "\nExtra directories (UE_AS_EXTRA_SCRIPT_ROOTS):\n"
        for root in extra_roots:
            out += f"  {exists_mark(os.path.exists(root))} {root}\n"
    return out + "\n"


def _files_section(
    settings: dict[str, Any], workspace: WorkspaceConfig, existing_roots: list[str]
) -> str:
    out = "Script Files:\n-------------\n"
    if not existing_roots:
        return out + "No existing script roots to scan\n\n"

    extension = settings["scanner"]["extension"]
    logger.debug("Scanning %d script roots for %s files", len(existing_roots), extension)
    files = scan_for_scripts(existing_roots, **scanner_options(settings))
    if not files:
        return out + f"No {extension} files found\n\n"

    per_root = Counter(f.root for f in files)
    extra = set(workspace.extra_script_roots)
    for root in existing_roots:
        label = root if root in extra else os.path.basename(root) + "/"
        out += f"  {label}: {per_root.get(root, 0)} files\n"
    return out + f"\nTotal: {len(files)} {extension} files\n\n"


def list_capabilities(
    workspace: WorkspaceConfig, uproject_name: str | None, existing_roots: list[str]
) -> list[Capability]:
    """Work out which operations can run in this workspace."""
    has_editor = bool(workspace.editor_cmd and os.path.exists(workspace.editor_cmd))
    has_project = bool(
        workspace.project_path
        and os.path.exists(workspace.project_path)
        and uproject_name
    )
    has_scripts = bool(existing_roots)

    if not has_editor:
        test_reason: str | None = "Editor binary not configured"
    elif not has_project:
        test_reason = "Project not configured"
    else:
        test_reason = None
    scripts_reason = None if has_scripts else "No script roots exist"

    return [
        Capability("Run unit tests (run-tests)", has_editor and has_project, test_reason),
        Capability("Get script roots (roots)", True),
        Capability("Search scripts (search)", has_scripts, scripts_reason),
        Capability("Read script content (read)", has_scripts, scripts_reason),
    ]


def project_info(settings: dict[str, Any], workspace: WorkspaceConfig) -> str:
    """Render an overview of the workspace."""
    uproject = find_uproject_file(workspace.project_path)
    uproject_name = uproject.name if uproject is not None else None
    roots = get_script_roots(workspace)
    existing_roots = [r for r in roots if os.path.exists(r)]

    out = "Unreal Engine Angelscript Project Overview\n"
    out += "==========================================\n\n"
    out += _configuration_section(workspace, uproject_name)
    out += _roots_section(workspace, roots)
    out += _files_section(settings, workspace, existing_roots)

    out += "Available Capabilities:\n-----------------------\n"
    for cap in list_capabilities(workspace, uproject_name, existing_roots):
        out += f"{exists_mark(cap.available)} {cap.name}"
        if cap.reason:
            out += f" - {cap.reason}"
        out += "\n"
    return out
