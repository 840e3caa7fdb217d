"""Registry of supported browser kinds.

All vendor differences live in one immutable table keyed by Kind. Every lookup
is a pure function over that table, so the registry is the single source of
truth for executable names, bundle names, display names and version parsing.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from browserscan.core.errors import VersionParseError

DEFAULT_APPLICATIONS_DIR = Path("/Applications")
VERSION_COLUMN_WIDTH = 13


class Kind(Enum):
    """Supported browser vendors, in declaration order."""

    BRAVE = "brave"
    CHROME = "chrome"
    EDGE = "edge"
    FIREFOX = "firefox"
    OPERA = "opera"

    def __str__(self) -> str:
        return short_name(self)


@dataclass(frozen=True)
class KindInfo:
    """Static metadata for one browser kind.

    version_has_name is False for vendors whose --version output is the bare
    version number without the display name in front of it.
    """

    executable: str
    bundle: str
    display_name: str
    short_name: str
    version_has_name: bool = True


_REGISTRY: dict[Kind, KindInfo] = {
    Kind.BRAVE: KindInfo(
        executable="Brave Browser",
        bundle="Brave Browser",
        display_name="Brave Browser",
        short_name="brave",
    ),
    Kind.CHROME: KindInfo(
        executable="Google Chrome",
        bundle="Google Chrome",
        display_name="Google Chrome",
        short_name="chrome",
    ),
    Kind.EDGE: KindInfo(
        executable="Microsoft Edge",
        bundle="Microsoft Edge",
        display_name="Microsoft Edge",
        short_name="edge",
    ),
    Kind.FIREFOX: KindInfo(
        executable="firefox",
        bundle="Firefox",
        display_name="Mozilla Firefox",
        short_name="firefox",
    ),
    Kind.OPERA: KindInfo(
        executable="Opera",
        bundle="Opera",
        display_name="Opera",
        short_name="opera",
        version_has_name=False,
    ),
}

_BY_EXECUTABLE: dict[str, Kind] = {info.executable: kind for kind, info in _REGISTRY.items()}

# Width of the name column in Browser.display_line. Derived from the whole
# registry, never from the kinds present in a result set.
NAME_COLUMN_WIDTH = max(len(info.display_name) for info in _REGISTRY.values())


def all_kinds() -> list[Kind]:
    """Return every supported kind in declaration order."""
    return list(Kind)


def kind_info(kind: Kind) -> KindInfo:
    return _REGISTRY[kind]


def executable_name(kind: Kind) -> str:
    return _REGISTRY[kind].executable


def bundle_name(kind: Kind) -> str:
    return _REGISTRY[kind].bundle


def display_name(kind: Kind) -> str:
    return _REGISTRY[kind].display_name


def short_name(kind: Kind) -> str:
    return _REGISTRY[kind].short_name


def from_executable_name(name: str) -> Kind | None:
    """Find the kind whose executable name is exactly `name`."""
    return _BY_EXECUTABLE.get(name)


def from_short_name(name: str) -> Kind | None:
    """Find the kind for a user-facing short name (case-insensitive)."""
    lowered = name.strip().lower()
    for kind, info in _REGISTRY.items():
        if info.short_name == lowered:
            return kind
    return None


def applications_path(kind: Kind, applications_dir: Path = DEFAULT_APPLICATIONS_DIR) -> Path:
    """Executable path inside the kind's bundle in an Applications directory.

    Example:
        >>> applications_path(Kind.FIREFOX)
        PosixPath('/Applications/Firefox.app/Contents/MacOS/firefox')
    """
    info = _REGISTRY[kind]
    return applications_dir / f"{info.bundle}.app" / "Contents" / "MacOS" / info.executable


def parse_version(kind: Kind, raw_output: str) -> tuple[str, str]:
    """Parse `--version` output into a (display name, version) pair.

    Args:
        kind: Browser kind whose parsing rule applies
        raw_output: Standard output of the version command

    Returns:
        Tuple of the kind's display name and the normalized version string

    Raises:
        VersionParseError: If the output does not start with the display name
            (for kinds that print it) or no version remains
    """
    info = _REGISTRY[kind]
    output = raw_output.strip()

    if info.version_has_name:
        if not output.startswith(info.display_name):
            raise VersionParseError(f"invalid version: {output}")
        version = output.removeprefix(info.display_name).strip()
    else:
        version = output

    if not version:
        raise VersionParseError(f"empty version for {info.short_name}: {output!r}")

    return info.display_name, version
