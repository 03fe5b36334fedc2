"""Numbered rendering of a file's lines."""

from pathlib import Path

from ue_angelscript.read_source_lines import read_source_lines


def read_file_with_lines(
    path: str | Path, start_line: int | None = None, end_line: int | None = None
) -> str:
    """Return the file's lines prefixed ``N:\\t`` for an inclusive range.

    Line numbers are 1-based; the start is clamped to 1 and the end to the
    last line.
    """
    lines = read_source_lines(path)
    start = max(1, start_line) - 1 if start_line else 0
    end = min(len(lines), end_line) if end_line else len(lines)
    return "\n".join(
        f"{start + i + 1}:\t{line}" for i, line in enumerate(lines[start:end])
    )
