"""Invocation of editor commandlets through the command-line editor binary."""

import logging
from collections.abc import Sequence

from ue_angelscript.bounded_output_buffer import MAX_OUTPUT_BYTES
from ue_angelscript.commandlet_result import CommandletResult
from ue_angelscript.process_runner import run_process

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 120.0


def build_commandlet_argv(
    editor_cmd: str,
    project_file: str,
    commandlet: str,
    args: Sequence[str] = (),
) -> list[str]:
    """Return ``[editor, project, -run=<commandlet>, *args]``."""
    return [editor_cmd, project_file, f"-run={commandlet}", *args]


def run_commandlet(
    editor_cmd: str,
    project_file: str,
    commandlet: str,
    args: Sequence[str] = (),
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    *,
    max_output_bytes: int = MAX_OUTPUT_BYTES,
) -> CommandletResult:
    """Run a commandlet against a project file and wait for its result."""
    argv = build_commandlet_argv(editor_cmd, project_file, commandlet, args)
    logger.info("Running commandlet %s (timeout: %ss)", commandlet, timeout_seconds)
    return run_process(argv, timeout_seconds, max_output_bytes=max_output_bytes)
