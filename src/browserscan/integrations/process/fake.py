"""Fake ProcessRunner implementation for testing.

FakeProcessRunner returns scripted results keyed by command line, enabling
tests of version resolution and Homebrew detection without real executables.
"""

import threading
from pathlib import Path

from browserscan.integrations.process.abc import ProcessResult, ProcessRunner


class FakeProcessRunner(ProcessRunner):
    """In-memory fake that returns configured results and records calls.

    Constructor Injection:
    - All results are provided via constructor parameters
    - Commands without a configured result raise FileNotFoundError, the same
      way a missing executable fails to spawn

    Calls may arrive from worker threads, so recording is lock-protected.

    Examples:
        >>> runner = FakeProcessRunner(
        ...     results={
        ...         ("/opt/homebrew/bin/firefox", "--version"): ProcessResult(
        ...             returncode=0, stdout="Mozilla Firefox 128.0\\n", stderr=""
        ...         ),
        ...     }
        ... )
        >>> runner.run(["/opt/homebrew/bin/firefox", "--version"]).stdout
        'Mozilla Firefox 128.0\\n'
    """

    def __init__(
        self,
        *,
        results: dict[tuple[str, ...], ProcessResult] | None = None,
        spawn_error: OSError | None = None,
    ) -> None:
        """Initialize fake with predetermined command results.

        Args:
            results: Mapping of command (as a tuple of strings) to its result
            spawn_error: Error to raise from spawn_detached(), or None to succeed
        """
        self._results = results or {}
        self._spawn_error = spawn_error
        self._lock = threading.Lock()
        self._run_calls: list[tuple[str, ...]] = []
        self._spawn_calls: list[tuple[str, ...]] = []

    def run(self, command: list[str | Path]) -> ProcessResult:
        key = tuple(str(arg) for arg in command)
        with self._lock:
            self._run_calls.append(key)
        if key not in self._results:
            raise FileNotFoundError(f"No such file or directory: '{key[0]}'")
        return self._results[key]

    def spawn_detached(self, command: list[str | Path]) -> None:
        key = tuple(str(arg) for arg in command)
        with self._lock:
            self._spawn_calls.append(key)
        if self._spawn_error is not None:
            raise self._spawn_error

    @property
    def run_calls(self) -> list[tuple[str, ...]]:
        """Get the list of run() calls that were made.

        This property is for test assertions only.
        """
        with self._lock:
            return self._run_calls.copy()

    @property
    def spawn_calls(self) -> list[tuple[str, ...]]:
        """Get the list of spawn_detached() calls that were made.

        This property is for test assertions only.
        """
        with self._lock:
            return self._spawn_calls.copy()
