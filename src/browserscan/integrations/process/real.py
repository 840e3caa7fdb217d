"""Real process execution using subprocess."""

import subprocess
from pathlib import Path

from browserscan.integrations.process.abc import ProcessResult, ProcessRunner


class RealProcessRunner(ProcessRunner):
    """Production implementation using subprocess.run() and subprocess.Popen().

    Exit status is not checked here. Callers decide what a non-zero exit means.
    """

    def run(self, command: list[str | Path]) -> ProcessResult:
        result = subprocess.run(
            [str(arg) for arg in command],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
        # Negative return codes mean the process was killed by a signal
        returncode = result.returncode if result.returncode >= 0 else None
        return ProcessResult(returncode=returncode, stdout=result.stdout, stderr=result.stderr)

    def spawn_detached(self, command: list[str | Path]) -> None:
        subprocess.Popen(
            [str(arg) for arg in command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
