import logging

import click

from browserscan.cli.commands.config import config_group
from browserscan.cli.commands.find import find_cmd
from browserscan.cli.commands.open import open_cmd
from browserscan.cli.error_boundary import cli_error_boundary
from browserscan.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"


class AliasedGroup(click.Group):
    """Click Group that resolves short aliases to registered commands."""

    aliases = {"f": "find", "o": "open"}

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))


def configure_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")


@click.group(cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="browserscan")
@click.option("--debug", is_flag=True, help="Log discovery details to stderr")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, debug: bool) -> None:
    """Find installed web browsers and open URLs in them."""
    configure_logging(debug)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()


cli.add_command(config_group)
cli.add_command(find_cmd)
cli.add_command(open_cmd)


def main() -> None:
    """CLI entry point used by the `browserscan` console script."""
    cli()
