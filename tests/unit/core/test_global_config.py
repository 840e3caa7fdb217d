"""Tests for loading and saving the global config file."""

from pathlib import Path

import pytest

from browserscan.core.global_config import (
    GlobalConfig,
    default_search_dirs,
    load_global_config,
    save_global_config,
    search_dirs,
)
from browserscan.core.kinds import Kind, all_kinds, short_name


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_global_config(tmp_path / "config.toml")

    assert config == GlobalConfig.defaults()
    assert config.default_browser == Kind.FIREFOX
    assert config.applications_dir == Path("/Applications")
    assert config.package_manager == "brew"


def test_load_reads_all_fields(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text(
        'extra_dirs = ["/Volumes/Apps", "/opt/apps"]\n'
        'default_browser = "chrome"\n'
        'applications_dir = "/tmp/Applications"\n'
        'package_manager = "/usr/local/bin/brew"\n'
        "max_workers = 2\n",
        encoding="utf-8",
    )

    config = load_global_config(path)

    assert config == GlobalConfig(
        extra_dirs=(Path("/Volumes/Apps"), Path("/opt/apps")),
        default_browser=Kind.CHROME,
        applications_dir=Path("/tmp/Applications"),
        package_manager="/usr/local/bin/brew",
        max_workers=2,
    )


def test_load_expands_home(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('extra_dirs = ["~/Applications"]\n', encoding="utf-8")

    config = load_global_config(path)

    assert config.extra_dirs == (Path.home() / "Applications",)


def test_load_rejects_unknown_browser(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('default_browser = "safari"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid browser for default_browser: safari"):
        load_global_config(path)


def test_load_rejects_bad_max_workers(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("max_workers = 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="max_workers must be at least 1"):
        load_global_config(path)


def test_load_rejects_malformed_toml(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("extra_dirs = [\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Malformed config"):
        load_global_config(path)


def test_load_rejects_non_list_extra_dirs(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text('extra_dirs = "/opt/apps"\n', encoding="utf-8")

    with pytest.raises(ValueError, match="'extra_dirs' must be a list"):
        load_global_config(path)


def test_save_then_load(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.toml"
    config = GlobalConfig(
        extra_dirs=(Path("/Volumes/Apps"),),
        default_browser=Kind.OPERA,
        applications_dir=Path("/Applications"),
        package_manager="brew",
        max_workers=3,
    )

    save_global_config(config, path)

    assert load_global_config(path) == config
    assert 'default_browser = "opera"' in path.read_text(encoding="utf-8")


@pytest.mark.parametrize("kind", all_kinds())
def test_save_writes_registry_short_name(tmp_path: Path, kind: Kind) -> None:
    path = tmp_path / "config.toml"
    config = GlobalConfig(
        extra_dirs=(),
        default_browser=kind,
        applications_dir=Path("/Applications"),
        package_manager="brew",
        max_workers=1,
    )

    save_global_config(config, path)

    text = path.read_text(encoding="utf-8")
    assert f'default_browser = "{short_name(kind)}"' in text
    assert load_global_config(path).default_browser == kind


def test_default_search_dirs_honor_homebrew_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOMEBREW_PREFIX", "/usr/local")

    assert default_search_dirs() == [Path("/usr/local"), Path("/Applications")]


def test_default_search_dirs_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOMEBREW_PREFIX", raising=False)

    assert default_search_dirs() == [Path("/opt/homebrew"), Path("/Applications")]


def test_search_dirs_order_without_duplicates(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOMEBREW_PREFIX", "/opt/homebrew")
    config = GlobalConfig(
        extra_dirs=(Path("/Volumes/Apps"), Path("/Applications")),
        default_browser=Kind.FIREFOX,
        applications_dir=Path("/Applications"),
        package_manager="brew",
        max_workers=1,
    )

    dirs = search_dirs(config, (Path("/tmp/more"), Path("/Volumes/Apps")))

    assert dirs == [
        Path("/opt/homebrew"),
        Path("/Applications"),
        Path("/Volumes/Apps"),
        Path("/tmp/more"),
    ]
