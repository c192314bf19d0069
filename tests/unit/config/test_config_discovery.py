"""Tests for config file discovery."""

from pathlib import Path
from unittest.mock import patch

import pytest

from convert_headers.config.settings import (
    find_git_root,
    find_toml_config_file,
    get_config_dir,
)


@pytest.mark.unit
class TestGetConfigDir:
    def test_uses_xdg_config_home(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        assert get_config_dir() == tmp_path / "xdg" / "convert-headers"

    def test_defaults_to_home_config(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        with patch("convert_headers.config.settings.Path.home", return_value=tmp_path):
            assert get_config_dir() == tmp_path / ".config" / "convert-headers"


@pytest.mark.unit
class TestFindGitRoot:
    def test_finds_root_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_git_root(nested) == tmp_path.resolve()

    def test_no_repository(self, tmp_path: Path) -> None:
        with patch("convert_headers.config.settings.Path.exists", return_value=False):
            assert find_git_root(tmp_path) is None


@pytest.mark.unit
class TestFindTomlConfigFile:
    def test_current_directory_first(self, tmp_path: Path) -> None:
        (tmp_path / ".git").mkdir()
        (tmp_path / "convert-headers.toml").write_text("", encoding="utf-8")
        local = tmp_path / ".convert-headers.toml"
        local.write_text("", encoding="utf-8")

        assert find_toml_config_file() == Path.cwd() / ".convert-headers.toml"

    def test_git_root(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / ".git").mkdir()
        (tmp_path / "convert-headers.toml").write_text("", encoding="utf-8")
        nested = tmp_path / "src"
        nested.mkdir()
        monkeypatch.chdir(nested)

        assert find_toml_config_file() == tmp_path.resolve() / "convert-headers.toml"

    def test_user_config_dir_fallback(self, tmp_path: Path) -> None:
        config_dir = tmp_path / "xdg" / "convert-headers"
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text("", encoding="utf-8")

        assert find_toml_config_file() == config_dir / "config.toml"

    def test_nothing_found(self) -> None:
        assert find_toml_config_file() is None
