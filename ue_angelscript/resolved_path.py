"""Data model for a path resolved inside the script roots."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedPath:
    """An existing file confined to one of the configured script roots."""

    absolute_path: str
    root: str
