"""Filesystem probes that find browser candidates.

Three independent strategies:
- known locations: fixed bundle paths under an Applications directory
- package manager: `<prefix>/bin` and `<prefix>/Caskroom` of a Homebrew install
- custom directories: `*.app` bundles directly inside caller-supplied directories

No probe raises. Unreadable directories, failed globs and a missing package
manager all degrade to "no candidates from this source" and are logged at debug.
"""

import logging
from collections.abc import Sequence
from concurrent.futures import Executor
from pathlib import Path

from browserscan.core.browser import Candidate
from browserscan.core.kinds import (
    DEFAULT_APPLICATIONS_DIR,
    Kind,
    applications_path,
    executable_name,
    from_executable_name,
)
from browserscan.integrations.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

PREFIX_FLAG = "--prefix"
BUNDLE_SUFFIX = ".app"


def _bundle_executable(bundle: Path, kind: Kind) -> Path:
    return bundle / "Contents" / "MacOS" / executable_name(kind)


def _list_dir(directory: Path) -> list[Path]:
    """Immediate entries of a directory, sorted, or [] if it cannot be read."""
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        logger.debug("Cannot read %s: %s", directory, e)
        return []


def _exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return False


def _is_file(path: Path) -> bool:
    try:
        return path.is_file()
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return False


def _known_location(kind: Kind, applications_dir: Path) -> Candidate | None:
    path = applications_path(kind, applications_dir)
    if not _exists(path):
        return None
    return Candidate(kind=kind, path=path)


def find_in_known_locations(
    executor: Executor,
    kinds: Sequence[Kind],
    applications_dir: Path = DEFAULT_APPLICATIONS_DIR,
) -> list[Candidate]:
    """Check each kind's fixed bundle path, one worker per kind."""
    found = executor.map(lambda kind: _known_location(kind, applications_dir), kinds)
    return [candidate for candidate in found if candidate is not None]


def detect_package_prefix(runner: ProcessRunner, package_manager: str) -> Path | None:
    """Ask the package manager for its install prefix.

    Returns:
        Prefix path, or None if the command cannot run, exits non-zero or
        prints nothing
    """
    try:
        result = runner.run([package_manager, PREFIX_FLAG])
    except OSError as e:
        logger.debug("%s %s error: %s", package_manager, PREFIX_FLAG, e)
        return None

    if not result.success:
        logger.debug("%s %s exited with %s", package_manager, PREFIX_FLAG, result.returncode)
        return None

    prefix = result.stdout.strip()
    if not prefix:
        return None
    return Path(prefix)


def find_executables_in_dir(directory: Path, kinds: Sequence[Kind]) -> list[Candidate]:
    """Find files in a flat directory named exactly like a known executable.

    Names are looked up in the full registry; only kinds in `kinds` are kept.
    """
    candidates = []
    for path in _list_dir(directory):
        kind = from_executable_name(path.name)
        if kind is None or kind not in kinds:
            continue
        if _is_file(path):
            candidates.append(Candidate(kind=kind, path=path))
    return candidates


def scan_caskroom(caskroom: Path, kinds: Sequence[Kind]) -> list[Candidate]:
    """Find browsers installed as Homebrew casks.

    A cask directory matches a kind when its lowercased name contains the kind's
    executable name. The first bundle under `<cask>/latest/*.app` that holds the
    executable is taken.
    """
    candidates = []
    for entry in _list_dir(caskroom):
        entry_name = entry.name.lower()
        for kind in kinds:
            exe = executable_name(kind)
            if exe not in entry_name:
                continue
            try:
                pattern = f"*{BUNDLE_SUFFIX}/Contents/MacOS/{exe}"
                matches = sorted((entry / "latest").glob(pattern))
            except OSError as e:
                logger.debug("Cannot glob %s: %s", entry, e)
                continue
            if matches:
                candidates.append(Candidate(kind=kind, path=matches[0]))
                break
    return candidates


def find_in_package_prefix(prefix: Path, kinds: Sequence[Kind]) -> list[Candidate]:
    """Look under `<prefix>/bin` and `<prefix>/Caskroom` for known browsers."""
    bin_matches = find_executables_in_dir(prefix / "bin", kinds)
    cask_matches = scan_caskroom(prefix / "Caskroom", kinds)
    return bin_matches + cask_matches


def find_in_package_manager(
    runner: ProcessRunner, package_manager: str, kinds: Sequence[Kind]
) -> list[Candidate]:
    prefix = detect_package_prefix(runner, package_manager)
    if prefix is None:
        return []
    logger.debug("Package manager prefix: %s", prefix)
    return find_in_package_prefix(prefix, kinds)


def _scan_custom_dir(directory: Path, kinds: Sequence[Kind]) -> list[Candidate]:
    candidates = []
    for entry in _list_dir(directory):
        if entry.suffix != BUNDLE_SUFFIX:
            continue
        for kind in kinds:
            exe = _bundle_executable(entry, kind)
            if _exists(exe):
                candidates.append(Candidate(kind=kind, path=exe))
                break
    return candidates


def find_in_custom_dirs(
    executor: Executor, dirs: Sequence[Path], kinds: Sequence[Kind]
) -> list[Candidate]:
    """Search caller-supplied directories for `*.app` bundles, one worker per directory.

    Each bundle is matched against `kinds` in order; the first kind whose
    executable exists inside the bundle wins.
    """
    per_dir = executor.map(lambda directory: _scan_custom_dir(directory, kinds), dirs)
    return [candidate for candidates in per_dir for candidate in candidates]
