"""The search-scripts operation."""

from itertools import islice
from typing import Any

from ue_angelscript.compile_pattern import InvalidPatternError, compile_pattern
from ue_angelscript.get_script_roots import get_script_roots
from ue_angelscript.messages import NO_SCRIPT_ROOTS, PROJECT_NOT_CONFIGURED
from ue_angelscript.scan_for_scripts import scan_for_scripts
from ue_angelscript.scanner_options import scanner_options
from ue_angelscript.search_in_files import search_in_files
from ue_angelscript.workspace_config import WorkspaceConfig


def search_scripts(
    settings: dict[str, Any],
    workspace: WorkspaceConfig,
    pattern: str,
    context_lines: int | None = None,
    max_results: int | None = None,
) -> str:
    """Search every script file for a regex and show numbered context."""
    if not workspace.project_path:
        return PROJECT_NOT_CONFIGURED

    roots = get_script_roots(workspace)
    if not roots:
        return NO_SCRIPT_ROOTS

    try:
        compile_pattern(pattern)
    except InvalidPatternError as e:
        return f"Error: {e}"

    search_settings = settings["search"]
    radius = search_settings["context_lines"] if context_lines is None else context_lines
    limit = search_settings["max_results"] if max_results is None else max_results

    files = scan_for_scripts(roots, **scanner_options(settings))
    hits = islice(search_in_files(files, pattern, radius), max(0, limit))

    results: list[str] = []
    match_count = 0
    for file, match in hits:
        results.append(f"\n{file.relative_path}:{match.line_number}")
        results.append(
            "\n".join(f"{c.line_number}:\t{c.content}" for c in match.context_lines)
        )
        match_count += 1

    lines = [
        f"Search pattern: {pattern}",
        f"Found {match_count} match(es) across {len(files)} file(s)",
        f"Showing up to {limit} result(s)\n",
    ]
    if not results:
        lines.append("No matches found.")
    else:
        lines.extend(results)
    return "\n".join(lines)
