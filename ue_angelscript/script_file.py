"""Data model for a discovered script file."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScriptFile:
    """Represents one script file found under a script root."""

    absolute_path: str
    relative_path: str  # always forward slashes
    root: str  # the script root it was found under
    size: int  # bytes, at scan time
