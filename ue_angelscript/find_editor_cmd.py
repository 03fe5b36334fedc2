"""Lookup of the command-line editor binary relative to a project root."""

from pathlib import Path

EDITOR_CMD_CANDIDATES = (
    "Engine/Binaries/Win64/UnrealEditor-Cmd.exe",
    "Engine/Binaries/Linux/UnrealEditor-Cmd",
    "Engine/Binaries/Mac/UnrealEditor-Cmd",
)


def find_editor_cmd(project_root: Path) -> Path | None:
    """Probe the project root and its parent for a known editor binary."""
    for base in (project_root, project_root.parent):
        for candidate in EDITOR_CMD_CANDIDATES:
            full = base / candidate
            if full.exists():
                return full
    return None
