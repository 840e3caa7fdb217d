"""Process execution abstraction for testing.

Every subprocess the discovery engine spawns goes through a ProcessRunner so
tests can script version output and exit codes without real browsers.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished command.

    returncode is None when the platform cannot report an exit status
    (for example the process was killed by a signal).
    """

    returncode: int | None
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


class ProcessRunner(ABC):
    """Abstract interface for running external commands."""

    @abstractmethod
    def run(self, command: list[str | Path]) -> ProcessResult:
        """Run a command to completion with no standard input.

        Standard output and standard error are captured separately.

        Args:
            command: Executable followed by its arguments

        Returns:
            ProcessResult with exit status and decoded output

        Raises:
            OSError: If the command cannot be spawned (missing file,
                permission denied, not executable)
        """
        ...

    @abstractmethod
    def spawn_detached(self, command: list[str | Path]) -> None:
        """Start a command without waiting for it.

        All standard streams are attached to the null device.

        Raises:
            OSError: If the command cannot be spawned
        """
        ...
