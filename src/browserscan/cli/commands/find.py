"""Find command implementation - lists installed browsers."""

import logging
from pathlib import Path

import click

from browserscan.cli.error_boundary import cli_error_boundary
from browserscan.cli.output import machine_output
from browserscan.cli.params import KIND_LIST
from browserscan.core.context import BrowserScanContext
from browserscan.core.global_config import search_dirs
from browserscan.core.kinds import Kind, all_kinds

logger = logging.getLogger(__name__)


@click.command("find")
@click.option(
    "-k",
    "--kind",
    "kinds",
    type=KIND_LIST,
    default=None,
    metavar="BROWSERS",
    help="Filter results by browser kinds (comma-separated, default: all)",
)
@click.option(
    "-a",
    "--all",
    "include_all",
    is_flag=True,
    help="Show every install location, not just one entry per version",
)
@click.option("-p", "--path", "path_only", is_flag=True, help="Print only executable paths")
@click.option(
    "-d",
    "--dir",
    "dirs",
    type=click.Path(path_type=Path, file_okay=False),
    multiple=True,
    help="Additional directory to scan for .app bundles (repeatable)",
)
@click.pass_obj
@cli_error_boundary
def find_cmd(
    ctx: BrowserScanContext,
    kinds: list[Kind] | None,
    include_all: bool,
    path_only: bool,
    dirs: tuple[Path, ...],
) -> None:
    """Find installed browsers."""
    requested = kinds if kinds is not None else all_kinds()
    extra_dirs = search_dirs(ctx.global_config, dirs)
    logger.debug("Searching for %s in %s", [str(k) for k in requested], extra_dirs)

    browsers = ctx.finder.find_all(extra_dirs, requested, include_all)

    for browser in browsers:
        if path_only:
            machine_output(str(browser.path))
        else:
            machine_output(browser.display_line)
