"""User-facing messages shared by the workspace operations."""

PROJECT_NOT_CONFIGURED = (
    "Error: Project path not configured. Please set the UE_AS_PROJECT_PATH "
    "environment variable to your Unreal project root directory "
    "(containing .uproject file)."
)
EDITOR_NOT_CONFIGURED = (
    "Error: Editor binary not configured. Please set the UE_AS_EDITOR_CMD "
    "environment variable to the path of UnrealEditor-Cmd.exe"
)
NO_SCRIPT_ROOTS = "Error: No script directories configured."
OK_MARK = "\u2713"
MISSING_MARK = "\u2717"


def exists_mark(exists: bool) -> str:
    """Return the check or cross shown next to a path."""
    return OK_MARK if exists else MISSING_MARK
