"""Tests for guidebook.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from guidebook.config import CONFIG_FILENAME, ROOT_ENV_VAR, load_config, resolve_root
from guidebook.errors import ConfigError


def _write_config(root: Path, body: str) -> None:
    (root / CONFIG_FILENAME).write_text(body, encoding="utf-8")


def test_defaults_without_file(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config.root_guide == "CLAUDE.md"
    assert config.readme == "README.md"
    assert config.prose_exclude_dirs == ["how", "why"]
    assert config.advisory_stages == []
    assert config.vale_cmd == ["vale"]


def test_empty_file_means_defaults(tmp_path: Path) -> None:
    _write_config(tmp_path, "")
    assert load_config(tmp_path).doc_glob == "**/*.md"


def test_overrides_only_given_keys(tmp_path: Path) -> None:
    _write_config(
        tmp_path,
        """
advisory_stages: [vale]
prose_include_dirs: [" docs/ "]
vale_cmd: [npx, vale]
""",
    )
    config = load_config(tmp_path)
    assert config.advisory_stages == ["vale"]
    assert config.prose_include_dirs == ["docs"]
    assert config.vale_cmd == ["npx", "vale"]
    assert config.prettier_cmd == ["prettier"]


def test_unknown_key_is_an_error(tmp_path: Path) -> None:
    _write_config(tmp_path, "categories: [how, why, what]\n")
    with pytest.raises(ConfigError, match="categories"):
        load_config(tmp_path)


def test_empty_command_is_an_error(tmp_path: Path) -> None:
    _write_config(tmp_path, "prettier_cmd: []\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_yaml(tmp_path: Path) -> None:
    _write_config(tmp_path, "advisory_stages: [vale\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_config(tmp_path)


def test_non_mapping_top_level(tmp_path: Path) -> None:
    _write_config(tmp_path, "- vale\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_resolve_root_prefers_argument(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(ROOT_ENV_VAR, "/somewhere/else")
    assert resolve_root(tmp_path) == tmp_path.resolve()


def test_resolve_root_from_env(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv(ROOT_ENV_VAR, str(tmp_path))
    assert resolve_root(None) == tmp_path.resolve()


def test_resolve_root_defaults_to_cwd(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(ROOT_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    assert resolve_root("") == Path.cwd()
