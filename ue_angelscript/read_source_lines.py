"""Line splitting that numbers lines the way editors and the compiler do."""

from pathlib import Path


def split_source_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n`` only.

    A final newline does not start an extra empty line, and the ``\\r`` of a
    CRLF ending is dropped. Form feeds, lone ``\\r`` and Unicode separators
    stay inside their line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_source_lines(path: str | Path) -> list[str]:
    """Read a UTF-8 source file (undecodable bytes replaced) as lines."""
    with open(path, encoding="utf-8", errors="replace", newline="") as f:
        return split_source_lines(f.read())
