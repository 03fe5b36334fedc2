"""Shared fixtures for the workspace operation tests."""

import copy
from pathlib import Path
from typing import Any

import pytest

from ue_angelscript.load_config import DEFAULT_CONFIG
from ue_angelscript.workspace_config import WorkspaceConfig

ACTOR_SOURCE = """\
class AMyActor : AActor
{
    // TODO: replace with a component
    int Health = 100;

    UFUNCTION(BlueprintOverride)
    void BeginPlay()
    {
        Print("Hello");
    }
}
"""


@pytest.fixture
def settings() -> dict[str, Any]:
    """Return a private copy of the default settings."""
    return copy.deepcopy(DEFAULT_CONFIG)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a game project with a few script files."""
    root = tmp_path / "MyGame"
    script = root / "Script"
    (script / "UI").mkdir(parents=True)
    (root / "MyGame.uproject").write_text("{}", encoding="utf-8")
    (script / "Actor.as").write_text(ACTOR_SOURCE, encoding="utf-8")
    (script / "UI" / "Menu.as").write_text(
        "class UMenu : UUserWidget\n{\n}\n", encoding="utf-8"
    )
    (script / "UI" / "Widget.as").write_text("// TODO: style\n", encoding="utf-8")
    (script / "readme.txt").write_text("TODO: not a script\n", encoding="utf-8")
    return root


@pytest.fixture
def workspace(project: Path) -> WorkspaceConfig:
    """Return a workspace pointing at the test project."""
    return WorkspaceConfig(project_path=str(project))
