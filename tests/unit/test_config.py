"""Tests for driver configuration loading and validation."""

from pathlib import Path

import pytest

from semtag.config import DEFAULT_PREFIX, DriverConfig, default_work_dir, load_config
from semtag.errors import ConfigurationError


def test_create_defaults_blank_prefix_to_v() -> None:
    config = DriverConfig.create(uri="https://example.com/repo.git", prefix="")

    assert config.prefix == DEFAULT_PREFIX == "v"
    assert config.work_dir == default_work_dir()


def test_create_keeps_explicit_prefix() -> None:
    config = DriverConfig.create(uri="https://example.com/repo.git", prefix="release-")

    assert config.prefix == "release-"


def test_create_requires_path_or_uri() -> None:
    with pytest.raises(ConfigurationError, match="either repository"):
        DriverConfig.create()


def test_create_rejects_both_path_and_uri(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="got both"):
        DriverConfig.create(uri="https://example.com/repo.git", repository=tmp_path)


def test_create_treats_empty_branch_as_unset() -> None:
    config = DriverConfig.create(uri="https://example.com/repo.git", branch="")

    assert config.branch is None


def test_load_config_reads_toml(tmp_path: Path) -> None:
    cfg = tmp_path / "semtag.toml"
    cfg.write_text(
        'uri = "https://example.com/repo.git"\n'
        'branch = "main"\n'
        'prefix = "rel-"\n'
        f'work_dir = "{tmp_path / "work"}"\n',
        encoding="utf-8",
    )

    config = load_config(cfg)

    assert config.uri == "https://example.com/repo.git"
    assert config.branch == "main"
    assert config.prefix == "rel-"
    assert config.work_dir == tmp_path / "work"
    assert config.repository is None


def test_load_config_overrides_win_over_file(tmp_path: Path) -> None:
    cfg = tmp_path / "semtag.toml"
    cfg.write_text('uri = "https://example.com/repo.git"\nbranch = "main"\n', encoding="utf-8")

    config = load_config(cfg, overrides={"branch": "develop", "prefix": None})

    assert config.branch == "develop"
    assert config.prefix == "v"


def test_load_config_without_file_uses_overrides(tmp_path: Path) -> None:
    config = load_config(None, overrides={"repository": str(tmp_path)})

    assert config.repository == tmp_path
    assert config.uri is None


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_config(tmp_path / "missing.toml")


def test_load_config_rejects_unknown_keys(tmp_path: Path) -> None:
    cfg = tmp_path / "semtag.toml"
    cfg.write_text('uri = "https://example.com/repo.git"\nbrnach = "main"\n', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="brnach"):
        load_config(cfg)


def test_load_config_rejects_invalid_toml(tmp_path: Path) -> None:
    cfg = tmp_path / "semtag.toml"
    cfg.write_text("uri = \n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid TOML"):
        load_config(cfg)


def test_load_config_rejects_non_string_values(tmp_path: Path) -> None:
    cfg = tmp_path / "semtag.toml"
    cfg.write_text('uri = "https://example.com/repo.git"\nprefix = 1\n', encoding="utf-8")

    with pytest.raises(ConfigurationError, match="prefix"):
        load_config(cfg)
