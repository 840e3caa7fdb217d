"""Open command implementation - opens a URL in an installed browser."""

import logging
from urllib.parse import urlsplit

import click

from browserscan.cli.ensure import Ensure
from browserscan.cli.error_boundary import cli_error_boundary
from browserscan.cli.params import KIND
from browserscan.core.context import BrowserScanContext
from browserscan.core.global_config import search_dirs
from browserscan.core.kinds import Kind

logger = logging.getLogger(__name__)

FLAG_NEW_TAB = "--new-tab"
FLAG_URL = "--url"
MACOS_PLATFORM = "darwin"


def is_absolute_url(url: str) -> bool:
    """Check that a URL has a scheme and something after it."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def build_open_args(url: str, new_tab: bool) -> list[str]:
    args = [FLAG_URL, url]
    if new_tab:
        args.insert(0, FLAG_NEW_TAB)
    return args


@click.command("open")
@click.option(
    "--new-tab/--no-new-tab",
    default=True,
    show_default=True,
    help="Open the URL in a new tab",
)
@click.option(
    "-b",
    "--browser",
    "kind",
    type=KIND,
    default=None,
    help="Browser to use (default: default_browser from config)",
)
@click.argument("url")
@click.pass_obj
@cli_error_boundary
def open_cmd(ctx: BrowserScanContext, new_tab: bool, kind: Kind | None, url: str) -> None:
    """Open URL in an installed browser (macOS only)."""
    Ensure.invariant(
        ctx.platform == MACOS_PLATFORM,
        "This command is not supported on non-macOS systems",
    )
    Ensure.invariant(is_absolute_url(url), f"Not a valid absolute URL: {url}")

    requested = kind if kind is not None else ctx.global_config.default_browser
    browser = ctx.finder.find_first(search_dirs(ctx.global_config), requested)

    command = [browser.path, *build_open_args(url, new_tab)]
    logger.debug("Launching %s", command)
    ctx.process.spawn_detached(command)
