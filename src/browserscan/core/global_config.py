"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.browserscan/config.toml.
A missing file is not an error: every field has a default.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from browserscan.core.discovery import DEFAULT_MAX_WORKERS, DEFAULT_PACKAGE_MANAGER
from browserscan.core.kinds import DEFAULT_APPLICATIONS_DIR, Kind, from_short_name, short_name

HOMEBREW_PREFIX_ENV = "HOMEBREW_PREFIX"
DEFAULT_HOMEBREW_PREFIX = "/opt/homebrew"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in BrowserScanContext.
    """

    extra_dirs: tuple[Path, ...]
    default_browser: Kind
    applications_dir: Path
    package_manager: str
    max_workers: int

    @staticmethod
    def defaults() -> "GlobalConfig":
        return GlobalConfig(
            extra_dirs=(),
            default_browser=Kind.FIREFOX,
            applications_dir=DEFAULT_APPLICATIONS_DIR,
            package_manager=DEFAULT_PACKAGE_MANAGER,
            max_workers=DEFAULT_MAX_WORKERS,
        )


def global_config_path() -> Path:
    """Get the path to the global config file."""
    return Path.home() / ".browserscan" / "config.toml"


def parse_kind(value: str, field_name: str) -> Kind:
    kind = from_short_name(value)
    if kind is None:
        raise ValueError(f"Invalid browser for {field_name}: {value}")
    return kind


def parse_max_workers(value: object, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int | str):
        raise ValueError(f"Invalid integer for {field_name}: {value}")
    try:
        workers = int(value)
    except ValueError:
        raise ValueError(f"Invalid integer for {field_name}: {value}") from None
    if workers < 1:
        raise ValueError(f"{field_name} must be at least 1, got {workers}")
    return workers


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config from ~/.browserscan/config.toml.

    Example config:
      extra_dirs = ["~/Applications"]
      default_browser = "chrome"
      max_workers = 4

    Args:
        path: Config file path (defaults to ~/.browserscan/config.toml)

    Returns:
        GlobalConfig with values from the file, or defaults if it doesn't exist

    Raises:
        ValueError: If the file is malformed or a value is invalid
    """
    config_path = path if path is not None else global_config_path()
    defaults = GlobalConfig.defaults()

    if not config_path.exists():
        return defaults

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config at {config_path}: {e}") from e

    raw_dirs = data.get("extra_dirs", [])
    if not isinstance(raw_dirs, list):
        raise ValueError(f"'extra_dirs' must be a list in {config_path}")

    default_browser = defaults.default_browser
    if "default_browser" in data:
        default_browser = parse_kind(str(data["default_browser"]), "default_browser")

    max_workers = defaults.max_workers
    if "max_workers" in data:
        max_workers = parse_max_workers(data["max_workers"], "max_workers")

    return GlobalConfig(
        extra_dirs=tuple(Path(str(d)).expanduser() for d in raw_dirs),
        default_browser=default_browser,
        applications_dir=Path(
            str(data.get("applications_dir", defaults.applications_dir))
        ).expanduser(),
        package_manager=str(data.get("package_manager", defaults.package_manager)),
        max_workers=max_workers,
    )


def save_global_config(config: GlobalConfig, path: Path | None = None) -> None:
    """Save global config to ~/.browserscan/config.toml.

    Args:
        config: GlobalConfig instance to save
        path: Config file path (defaults to ~/.browserscan/config.toml)
    """
    config_path = path if path is not None else global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    doc = tomlkit.document()
    doc.add(tomlkit.comment("Global browserscan configuration"))
    doc["extra_dirs"] = [str(d) for d in config.extra_dirs]
    doc["default_browser"] = short_name(config.default_browser)
    doc["applications_dir"] = str(config.applications_dir)
    doc["package_manager"] = config.package_manager
    doc["max_workers"] = config.max_workers

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")


def default_search_dirs(applications_dir: Path = DEFAULT_APPLICATIONS_DIR) -> list[Path]:
    """Directories scanned for `*.app` bundles before any configured extras.

    Honors $HOMEBREW_PREFIX, falling back to /opt/homebrew.
    """
    homebrew_prefix = os.environ.get(HOMEBREW_PREFIX_ENV, DEFAULT_HOMEBREW_PREFIX)
    return [Path(homebrew_prefix), applications_dir]


def search_dirs(config: GlobalConfig, cli_dirs: tuple[Path, ...] = ()) -> list[Path]:
    """Default directories, then configured extra_dirs, then CLI-supplied ones."""
    ordered = [*default_search_dirs(config.applications_dir), *config.extra_dirs, *cli_dirs]
    dirs: list[Path] = []
    for directory in ordered:
        if directory not in dirs:
            dirs.append(directory)
    return dirs
