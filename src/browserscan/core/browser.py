"""Candidate and resolved browser types."""

from dataclasses import dataclass
from pathlib import Path

from browserscan.core.kinds import NAME_COLUMN_WIDTH, VERSION_COLUMN_WIDTH, Kind


@dataclass(frozen=True)
class Candidate:
    """A file that looks like `kind`'s executable, not yet version-checked."""

    kind: Kind
    path: Path


@dataclass(frozen=True)
class Browser:
    """An installed browser whose version command succeeded and parsed.

    Only the version resolver constructs these. `name` is the kind's display name.
    """

    name: str
    kind: Kind
    path: Path
    version: str

    @property
    def version_key(self) -> str:
        """Key that collapses installs of the same name and version."""
        return f"{self.name} {self.version}"

    @property
    def display_line(self) -> str:
        """Column-aligned one-line description, also used as the full-identity key."""
        return format_browser_line(self.name, self.version, self.path)

    def __str__(self) -> str:
        return self.display_line


def format_browser_line(name: str, version: str, path: Path) -> str:
    """Format name, version and path into fixed-width columns.

    The column widths come from the full kind registry so the same browser
    always formats to the same line regardless of which kinds were requested.
    """
    return f"{name:<{NAME_COLUMN_WIDTH}} {version:<{VERSION_COLUMN_WIDTH}} {path}"
