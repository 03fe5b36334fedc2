"""Run an external process with a wall-clock timeout and bounded output.

A run moves through STARTING -> RUNNING -> one of COMPLETED, TIMED_OUT or
SPAWN_FAILED. The exit path and the timer callback both go through
``_finalize``, which lets exactly one of them claim the terminal state.
Every outcome is reported as a CommandletResult; nothing is raised for a
failed, killed or unlaunchable process.
"""

import logging
import os
import shlex
import signal
import subprocess
import sys
import threading
from collections.abc import Mapping, Sequence
from typing import IO

from ue_angelscript.bounded_output_buffer import MAX_OUTPUT_BYTES, BoundedOutputBuffer
from ue_angelscript.commandlet_result import (
    SPAWN_FAILED_EXIT_CODE,
    CommandletResult,
    ProcessState,
)

logger = logging.getLogger(__name__)

READ_CHUNK_BYTES = 64 * 1024
# How long to wait for the pipes to drain once the child itself has exited.
READER_JOIN_SECONDS = 5.0


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def _platform_popen_kwargs() -> dict[str, object]:
    if sys.platform == "win32":
        return {"creationflags": getattr(subprocess, "CREATE_NO_WINDOW", 0)}
    return {"start_new_session": True}


def _pump(stream: IO[bytes], buffer: BoundedOutputBuffer) -> None:
    """Copy a pipe into a buffer until EOF, draining past the ceiling."""
    with stream:
        while True:
            try:
                chunk = stream.read1(READ_CHUNK_BYTES)  # type: ignore[attr-defined]
            except (OSError, ValueError):
                # Closed by the runner after the join timed out, or a read error.
                break
            if not chunk:
                break
            buffer.append(chunk)


def _close_abandoned_pipe(stream: IO[bytes] | None) -> None:
    """Release the fd of a pipe a helper process is still holding open.

    The raw file is closed directly; the buffered wrapper's lock is held
    by the reader thread blocked in read1. That read returns when the
    helper next writes or exits, and the reader then stops.
    """
    if stream is None:
        return
    raw = getattr(stream, "raw", stream)
    try:
        raw.close()
    except OSError as e:
        logger.debug("Failed to close abandoned pipe: %s", e)


def _kill(process: subprocess.Popen[bytes]) -> None:
    """Forcibly terminate the process (and its process group on POSIX)."""
    if process.returncode is not None:
        return
    if sys.platform != "win32":
        try:
            os.killpg(process.pid, signal.SIGKILL)
            return
        except ProcessLookupError:
            return
        except OSError as e:
            logger.debug("killpg failed for pid %s: %s", process.pid, e)
    try:
        process.kill()
    except OSError as e:
        logger.debug("kill failed for pid %s: %s", process.pid, e)


class ProcessRunner:
    """Single-use runner for one external process invocation."""

    def __init__(
        self,
        argv: Sequence[str],
        timeout_seconds: float,
        *,
        max_output_bytes: int = MAX_OUTPUT_BYTES,
        cwd: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Prepare a run of ``argv``; nothing is spawned until run()."""
        if not argv:
            msg = "argv must name an executable"
            raise ValueError(msg)
        self.argv = [str(a) for a in argv]
        self.timeout_seconds = timeout_seconds
        self.max_output_bytes = max_output_bytes
        self.cwd = cwd
        self.env = dict(env) if env is not None else None
        self.state = ProcessState.STARTING
        self.pid: int | None = None
        self._process: subprocess.Popen[bytes] | None = None
        self._lock = threading.Lock()

    def run(self) -> CommandletResult:
        """Spawn the process and block until it reaches a terminal state."""
        if self.state is not ProcessState.STARTING:
            msg = "ProcessRunner instances can only be run once"
            raise RuntimeError(msg)

        stdout = BoundedOutputBuffer("stdout", self.max_output_bytes)
        stderr = BoundedOutputBuffer("stderr", self.max_output_bytes)

        logger.debug("Running commandlet: %s", _fmt_argv(self.argv))
        try:
            process = subprocess.Popen(
                self.argv,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=self.cwd,
                env=self.env,
                **_platform_popen_kwargs(),  # type: ignore[call-overload]
            )
        except (OSError, ValueError) as e:
            # ValueError: an embedded NUL byte in the executable or an argument.
            logger.error("Failed to spawn commandlet %s: %s", self.argv[0], e)
            self.state = ProcessState.SPAWN_FAILED
            return CommandletResult(
                exit_code=SPAWN_FAILED_EXIT_CODE,
                stdout=stdout.text(),
                stderr=stderr.text() + f"\nSpawn error: {e}",
                timed_out=False,
                state=ProcessState.SPAWN_FAILED,
            )

        self._process = process
        self.pid = process.pid
        self.state = ProcessState.RUNNING

        # Armed at spawn, so the deadline is measured from process start.
        timer = threading.Timer(self.timeout_seconds, self._on_timeout)
        timer.daemon = True
        timer.start()

        readers = [
            (self._start_reader(process.stdout, stdout), process.stdout, stdout),
            (self._start_reader(process.stderr, stderr), process.stderr, stderr),
        ]
        try:
            exit_code = process.wait()
        finally:
            timer.cancel()
        self._finalize(ProcessState.COMPLETED)

        for reader, pipe, buffer in readers:
            reader.join(READER_JOIN_SECONDS)
            if reader.is_alive():
                logger.warning(
                    "%s pipe still open after pid %s exited; "
                    "returning captured output",
                    buffer.stream_name,
                    process.pid,
                )
                buffer.close()
                _close_abandoned_pipe(pipe)

        logger.debug("Commandlet exited with code %s", exit_code)
        return CommandletResult(
            exit_code=exit_code,
            stdout=stdout.text(),
            stderr=stderr.text(),
            timed_out=self.state is ProcessState.TIMED_OUT,
            stdout_truncated=stdout.truncated,
            stderr_truncated=stderr.truncated,
            state=self.state,
        )

    def _start_reader(
        self, stream: IO[bytes] | None, buffer: BoundedOutputBuffer
    ) -> threading.Thread:
        thread = threading.Thread(
            target=_pump,
            args=(stream, buffer),
            name=f"commandlet-{buffer.stream_name}-{self.pid}",
            daemon=True,
        )
        thread.start()
        return thread

    def _finalize(self, state: ProcessState) -> bool:
        """Enter ``state`` if no terminal state was entered yet."""
        with self._lock:
            if self.state is not ProcessState.RUNNING:
                return False
            self.state = state
            return True

    def _on_timeout(self) -> None:
        if not self._finalize(ProcessState.TIMED_OUT):
            return
        logger.warning(
            "Commandlet timed out after %ss, killing process %s",
            self.timeout_seconds,
            self.pid,
        )
        if self._process is not None:
            _kill(self._process)


def run_process(
    argv: Sequence[str],
    timeout_seconds: float,
    *,
    max_output_bytes: int = MAX_OUTPUT_BYTES,
    cwd: str | None = None,
    env: Mapping[str, str] | None = None,
) -> CommandletResult:
    """Run ``argv`` once and return its result."""
    runner = ProcessRunner(
        argv,
        timeout_seconds,
        max_output_bytes=max_output_bytes,
        cwd=cwd,
        env=env,
    )
    return runner.run()
