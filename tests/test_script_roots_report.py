"""Tests for script root discovery and its report."""

import sys
from pathlib import Path
from typing import Any

from ue_angelscript.script_roots_report import (
    discover_script_roots,
    parse_roots_output,
    script_roots_report,
)
from ue_angelscript.workspace_config import WorkspaceConfig


def test_parse_roots_output(tmp_path: Path) -> None:
    """Verify only absolute, non-log lines are taken as roots."""
    root = str(tmp_path / "Script")
    stdout = f"LogInit: starting\n{root}\nrelative/dir\n\n  {root}2  \n"
    assert parse_roots_output(stdout) == [root, root + "2"]


def test_roots_from_commandlet(settings: dict[str, Any], project: Path) -> None:
    """Verify roots printed by the editor are used when it succeeds."""
    reported = project / "Plugins" / "Script"
    (project / "MyGame.uproject").write_text(
        f"print('LogAngelscript: scanning')\nprint({str(reported)!r})\n",
        encoding="utf-8",
    )
    workspace = WorkspaceConfig(project_path=str(project), editor_cmd=sys.executable)

    roots = discover_script_roots(settings, workspace)
    assert [(r.path, r.exists, r.source) for r in roots] == [
        (str(reported), False, "commandlet")
    ]


def test_falls_back_to_config_on_failure(
    settings: dict[str, Any], project: Path
) -> None:
    """Verify a failing commandlet falls back to the configured roots."""
    (project / "MyGame.uproject").write_text("raise SystemExit(2)\n", encoding="utf-8")
    workspace = WorkspaceConfig(project_path=str(project), editor_cmd=sys.executable)

    roots = discover_script_roots(settings, workspace)
    assert [r.source for r in roots] == ["config", "config"]
    assert roots[0].path == str(project / "Script")
    assert roots[0].exists
    assert not roots[1].exists


def test_report_without_editor(
    settings: dict[str, Any], workspace: WorkspaceConfig, project: Path
) -> None:
    """Verify the report marks each configured root and totals them."""
    out = script_roots_report(settings, workspace)
    assert out.startswith("Script Root Directories:\n\n")
    assert f"✓ {project / 'Script'} (config)\n" in out
    assert f"✗ {project / 'Scripts'} (config)\n" in out
    assert out.endswith("Total: 2 roots (1 exist on disk)\n")


def test_report_without_project(settings: dict[str, Any]) -> None:
    """Verify the hint shown when nothing is configured."""
    out = script_roots_report(settings, WorkspaceConfig())
    assert "No script roots found." in out
    assert "Set UE_AS_PROJECT_PATH" in out
