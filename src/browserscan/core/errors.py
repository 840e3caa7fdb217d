"""Exceptions raised by the browser discovery engine.

Per-candidate failures (VersionCommandError, VersionParseError) are absorbed by
the aggregator. BrowserNotFoundError is the only error surfaced to callers.
"""

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from browserscan.core.kinds import Kind


class VersionCommandError(RuntimeError):
    """The version command could not be spawned or exited non-zero."""

    def __init__(self, path: Path, exit_code: int | None, reason: str) -> None:
        self.path = path
        self.exit_code = exit_code
        super().__init__(f"{path} --version failed: {reason}")


class VersionParseError(ValueError):
    """Version command output does not follow the kind's parsing rule."""


class BrowserNotFoundError(LookupError):
    """No installed browser of the requested kind could be resolved."""

    def __init__(self, kind: "Kind") -> None:
        self.kind = kind
        super().__init__(f"No browser found for {kind}")
