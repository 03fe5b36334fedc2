"""Data models for regex search results."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContextLine:
    """One numbered line of a context window."""

    line_number: int
    content: str


@dataclass(frozen=True)
class SearchMatch:
    """A single matching line and the lines surrounding it."""

    line_number: int  # 1-based
    matched_line: str
    context_lines: tuple[ContextLine, ...]
