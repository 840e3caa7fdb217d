"""Browser discovery: fan out probes, resolve versions, deduplicate.

find_all() re-scans the filesystem on every call. Candidates from the three
probes are concatenated in a fixed order (known locations, package manager,
custom directories), resolved concurrently, and reduced with one of two pure
deduplication functions.
"""

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from browserscan.core.browser import Browser, Candidate
from browserscan.core.errors import BrowserNotFoundError
from browserscan.core.kinds import DEFAULT_APPLICATIONS_DIR, Kind
from browserscan.core.probes import (
    find_in_custom_dirs,
    find_in_known_locations,
    find_in_package_manager,
)
from browserscan.core.version_resolver import try_resolve_browser
from browserscan.integrations.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_MANAGER = "brew"
DEFAULT_MAX_WORKERS = 8


def dedupe_by_version(browsers: Iterable[Browser]) -> dict[str, Browser]:
    """Keep the first browser for each "<name> <version>" key."""
    seen: dict[str, Browser] = {}
    for browser in browsers:
        if browser.version_key not in seen:
            logger.debug("Found browser: %r", browser)
            seen[browser.version_key] = browser
    return seen


def dedupe_by_display_line(browsers: Iterable[Browser]) -> dict[str, Browser]:
    """Keep one browser per distinct display line (name, version and path)."""
    seen: dict[str, Browser] = {}
    for browser in browsers:
        seen.setdefault(browser.display_line, browser)
    return seen


def sorted_values(browsers_by_key: dict[str, Browser]) -> list[Browser]:
    """Values ordered lexicographically by their key."""
    return [browsers_by_key[key] for key in sorted(browsers_by_key)]


class BrowserFinder:
    """Locates installed browsers using all probes.

    Example:
        finder = BrowserFinder(RealProcessRunner())
        for browser in finder.find_all([Path("/opt/homebrew")], all_kinds(), False):
            print(browser.display_line)
    """

    def __init__(
        self,
        runner: ProcessRunner,
        *,
        applications_dir: Path = DEFAULT_APPLICATIONS_DIR,
        package_manager: str = DEFAULT_PACKAGE_MANAGER,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        self._runner = runner
        self._applications_dir = applications_dir
        self._package_manager = package_manager
        self._max_workers = max_workers

    def find_candidates(self, extra_dirs: Sequence[Path], kinds: Sequence[Kind]) -> list[Candidate]:
        """Run every probe and concatenate their candidates in probe order."""
        # Workers only run leaf tasks; all fan-out is driven from this thread.
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            package = executor.submit(
                find_in_package_manager, self._runner, self._package_manager, kinds
            )
            known = find_in_known_locations(executor, kinds, self._applications_dir)
            custom = find_in_custom_dirs(executor, extra_dirs, kinds)
            candidates = known + package.result() + custom

        logger.debug("Collected %d candidates", len(candidates))
        return candidates

    def resolve(self, candidates: Sequence[Candidate]) -> list[Browser]:
        """Resolve candidates concurrently, dropping any that fail.

        The returned list keeps the order of `candidates`.
        """
        if not candidates:
            return []
        with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
            results = list(
                executor.map(lambda c: try_resolve_browser(self._runner, c), candidates)
            )
        return [browser for browser in results if browser is not None]

    def find_all(
        self,
        extra_dirs: Sequence[Path],
        kinds: Sequence[Kind],
        include_all_matches: bool,
    ) -> list[Browser]:
        """Find installed browsers of the given kinds.

        Args:
            extra_dirs: Directories to scan for `*.app` bundles
            kinds: Kinds to look for, in priority order for bundle matching
            include_all_matches: If False, keep one browser per name and version.
                If True, keep one per name, version and path.

        Returns:
            Browsers sorted by the selected deduplication key. Empty if nothing
            was found; per-source and per-candidate failures are never raised.
        """
        browsers = self.resolve(self.find_candidates(extra_dirs, kinds))

        if include_all_matches:
            return sorted_values(dedupe_by_display_line(browsers))
        return sorted_values(dedupe_by_version(browsers))

    def find_first(self, extra_dirs: Sequence[Path], kind: Kind) -> Browser:
        """Find the first browser of one kind.

        Raises:
            BrowserNotFoundError: If no browser of `kind` resolves
        """
        browsers = self.find_all(extra_dirs, [kind], include_all_matches=False)
        if not browsers:
            raise BrowserNotFoundError(kind)
        return browsers[0]
