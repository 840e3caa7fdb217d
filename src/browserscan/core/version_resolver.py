"""Resolve candidates into browsers by running their version command."""

import logging

from browserscan.core.browser import Browser, Candidate
from browserscan.core.errors import VersionCommandError, VersionParseError
from browserscan.core.kinds import parse_version
from browserscan.integrations.process.abc import ProcessRunner

logger = logging.getLogger(__name__)

VERSION_FLAG = "--version"


def resolve_browser(runner: ProcessRunner, candidate: Candidate) -> Browser:
    """Run `<path> --version` and build a Browser from its output.

    Args:
        runner: Process runner used to invoke the candidate
        candidate: Kind and executable path found by a probe

    Returns:
        Browser with the kind's display name and parsed version

    Raises:
        VersionCommandError: If the executable cannot be spawned or exits non-zero
        VersionParseError: If stdout does not match the kind's version format
    """
    try:
        result = runner.run([candidate.path, VERSION_FLAG])
    except OSError as e:
        raise VersionCommandError(candidate.path, None, str(e)) from e

    logger.debug(
        "%s %s: (exit: %s) (stdout: %s) (stderr: %s)",
        candidate.path,
        VERSION_FLAG,
        result.returncode,
        result.stdout.strip(),
        result.stderr.strip(),
    )

    if not result.success:
        code = "unknown" if result.returncode is None else str(result.returncode)
        raise VersionCommandError(candidate.path, result.returncode, f"non-zero exit code: {code}")

    name, version = parse_version(candidate.kind, result.stdout)
    return Browser(name=name, kind=candidate.kind, path=candidate.path, version=version)


def try_resolve_browser(runner: ProcessRunner, candidate: Candidate) -> Browser | None:
    """Resolve a candidate, returning None instead of raising on failure."""
    try:
        return resolve_browser(runner, candidate)
    except (VersionCommandError, VersionParseError) as e:
        logger.debug("%s %s error: %s", candidate.path, VERSION_FLAG, e)
        return None
