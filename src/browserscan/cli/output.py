"""Output utilities for CLI commands with clear intent.

user_output() is for messages meant for a person and goes to stderr.
machine_output() is for results that may be piped and goes to stdout.
"""

import click


def user_output(message: str) -> None:
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    click.echo(message)
