"""Scanner keyword arguments derived from the tool settings."""

from typing import Any


def scanner_options(settings: dict[str, Any]) -> dict[str, Any]:
    """Return ``extension``/``skip_dirs`` keywords for scan_for_scripts."""
    scanner = settings["scanner"]
    return {
        "extension": scanner["extension"],
        "skip_dirs": frozenset(scanner["skip_dirs"]),
    }
