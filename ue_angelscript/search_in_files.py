"""Line-oriented regex search across script files."""

import logging
import re
from collections.abc import Iterable, Iterator

from ue_angelscript.compile_pattern import compile_pattern
from ue_angelscript.read_source_lines import read_source_lines
from ue_angelscript.script_file import ScriptFile
from ue_angelscript.search_match import ContextLine, SearchMatch

logger = logging.getLogger(__name__)


def search_in_file(
    file: ScriptFile, pattern: re.Pattern[str], context_lines: int
) -> list[SearchMatch]:
    """Return one match per matching line of ``file``.

    The context window covers ``context_lines`` lines either side of the
    match, clamped to the start and end of the file. Unreadable files
    yield no matches.
    """
    try:
        lines = read_source_lines(file.absolute_path)
    except OSError as e:
        logger.warning("Failed to search in file %s: %s", file.absolute_path, e)
        return []

    radius = max(0, context_lines)
    matches: list[SearchMatch] = []
    for i, line in enumerate(lines):
        if not pattern.search(line):
            continue
        first = max(0, i - radius)
        last = min(len(lines) - 1, i + radius)
        window = tuple(
            ContextLine(line_number=j + 1, content=lines[j])
            for j in range(first, last + 1)
        )
        matches.append(
            SearchMatch(line_number=i + 1, matched_line=line, context_lines=window)
        )
    return matches


def search_in_files(
    files: Iterable[ScriptFile], pattern: str, context_lines: int
) -> Iterator[tuple[ScriptFile, SearchMatch]]:
    """Search ``files`` in order for lines matching ``pattern``.

    The pattern is compiled before any file is opened, so an invalid
    pattern raises InvalidPatternError immediately. Files are then read
    lazily as the returned iterator is consumed; callers cap results by
    stopping iteration.
    """
    regex = compile_pattern(pattern)
    return _iter_matches(files, regex, context_lines)


def _iter_matches(
    files: Iterable[ScriptFile], regex: re.Pattern[str], context_lines: int
) -> Iterator[tuple[ScriptFile, SearchMatch]]:
    for file in files:
        for match in search_in_file(file, regex, context_lines):
            yield file, match
