from dataclasses import replace
from pathlib import Path

import click

from browserscan.cli.error_boundary import cli_error_boundary
from browserscan.cli.output import machine_output, user_output
from browserscan.core.context import BrowserScanContext
from browserscan.core.global_config import (
    GlobalConfig,
    global_config_path,
    parse_kind,
    parse_max_workers,
    save_global_config,
)

CONFIG_KEYS = (
    "extra_dirs",
    "default_browser",
    "applications_dir",
    "package_manager",
    "max_workers",
)


def _format_value(config: GlobalConfig, key: str) -> str:
    match key:
        case "extra_dirs":
            return ",".join(str(d) for d in config.extra_dirs)
        case "default_browser":
            return str(config.default_browser)
        case "applications_dir":
            return str(config.applications_dir)
        case "package_manager":
            return config.package_manager
        case "max_workers":
            return str(config.max_workers)
        case _:
            raise ValueError(f"Invalid key: {key}")


def _update_global_config_field(current: GlobalConfig, key: str, value: str) -> GlobalConfig:
    """Return a copy of `current` with one field parsed from its string form.

    extra_dirs takes a comma-separated list; an empty string clears it.

    Raises:
        ValueError: If the key is unknown or the value is invalid
    """
    match key:
        case "extra_dirs":
            parts = [part.strip() for part in value.split(",") if part.strip()]
            dirs = tuple(Path(part).expanduser() for part in parts)
            return replace(current, extra_dirs=dirs)
        case "default_browser":
            return replace(current, default_browser=parse_kind(value, key))
        case "applications_dir":
            return replace(current, applications_dir=Path(value).expanduser())
        case "package_manager":
            if not value.strip():
                raise ValueError("package_manager cannot be empty")
            return replace(current, package_manager=value.strip())
        case "max_workers":
            return replace(current, max_workers=parse_max_workers(value, key))
        case _:
            raise ValueError(f"Invalid key: {key}")


@click.group("config")
def config_group() -> None:
    """Manage browserscan configuration."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: BrowserScanContext) -> None:
    """Print a list of configuration keys and values."""
    user_output(click.style(f"Global configuration ({global_config_path()}):", bold=True))
    for key in CONFIG_KEYS:
        machine_output(f"{key}={_format_value(ctx.global_config, key)}")


@config_group.command("get")
@click.argument("key", metavar="KEY")
@click.pass_obj
@cli_error_boundary
def config_get(ctx: BrowserScanContext, key: str) -> None:
    """Print the value of a given configuration key."""
    machine_output(_format_value(ctx.global_config, key))


@config_group.command("set")
@click.argument("key", metavar="KEY")
@click.argument("value", metavar="VALUE")
@click.pass_obj
@cli_error_boundary
def config_set(ctx: BrowserScanContext, key: str, value: str) -> None:
    """Update configuration with a value for the given key."""
    new_config = _update_global_config_field(ctx.global_config, key, value)
    save_global_config(new_config)
    user_output(f"Set {key}={_format_value(new_config, key)}")
