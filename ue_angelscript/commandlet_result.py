"""Data models for the outcome of an external process run."""

from dataclasses import dataclass
from enum import Enum

SPAWN_FAILED_EXIT_CODE = -1


class ProcessState(str, Enum):
    """Lifecycle states of a single process run."""

    STARTING = "starting"
    RUNNING = "running"
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"
    SPAWN_FAILED = "spawn_failed"


@dataclass(frozen=True)
class CommandletResult:
    """Represents the final, immutable result of running a commandlet."""

    exit_code: int
    stdout: str
    stderr: str
    timed_out: bool
    stdout_truncated: bool = False
    stderr_truncated: bool = False
    state: ProcessState = ProcessState.COMPLETED

    @property
    def spawn_failed(self) -> bool:
        """Return True if the executable could not be launched at all."""
        return self.state is ProcessState.SPAWN_FAILED

    @property
    def passed(self) -> bool:
        """Return True if the process ran to completion with exit code 0."""
        return self.state is ProcessState.COMPLETED and self.exit_code == 0
