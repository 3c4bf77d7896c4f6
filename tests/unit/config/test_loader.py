"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from disguise.config.loader import (
    deep_merge,
    get_config_dir,
    get_environment,
    load_config,
    load_toml,
)


class TestDeepMerge:
    """Tests for deep_merge function."""

    def test_merge_nested_dicts(self) -> None:
        """Nested dictionaries are merged recursively."""
        base = {"http": {"timeout": 10.0, "user_agent": "a"}, "app_name": "x"}
        override = {"http": {"timeout": 2.0}}
        result = deep_merge(base, override)
        assert result == {"http": {"timeout": 2.0, "user_agent": "a"}, "app_name": "x"}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict values in override replace base values."""
        result = deep_merge({"a": {"x": 1}}, {"a": "replaced"})
        assert result == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        """Original base dictionary is not modified."""
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        toml_file = tmp_path / "test.toml"
        toml_file.write_text('[http]\nuser_agent = "ua"\ntimeout = 3')

        assert load_toml(toml_file) == {"http": {"user_agent": "ua", "timeout": 3}}

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISGUISE_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DISGUISE_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_dir = tmp_path / "custom_config"
        config_dir.mkdir()
        monkeypatch.setenv("DISGUISE_CONFIG_DIR", str(config_dir))

        assert get_config_dir() == config_dir

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DISGUISE_CONFIG_DIR", str(tmp_path / "missing"))

        with pytest.raises(FileNotFoundError):
            get_config_dir()

    def test_defaults_to_cwd_config_only(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A config directory in a parent of the cwd is not picked up."""
        (tmp_path / "config" / "default.toml").write_text("app_name = 'parent'")
        workdir = tmp_path / "app"
        workdir.mkdir()
        monkeypatch.delenv("DISGUISE_CONFIG_DIR")
        monkeypatch.chdir(workdir)

        assert get_config_dir() == workdir / "config"
        assert load_config() == {}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_default_gives_empty_config(self) -> None:
        """Without any TOML files code defaults apply."""
        assert load_config() == {}

    def test_loads_default_config(self, mock_toml_files) -> None:
        mock_toml_files({"default.toml": "app_name = 'test'\n[http]\ntimeout = 3.0"})
        assert load_config() == {"app_name": "test", "http": {"timeout": 3.0}}

    def test_merges_environment_config(self, mock_toml_files) -> None:
        """Environment config overrides default config."""
        mock_toml_files(
            {
                "default.toml": "app_name = 'test'\n[http]\ntimeout = 3.0",
                "test.toml": "[http]\ntimeout = 1.0",
            }
        )
        assert load_config() == {"app_name": "test", "http": {"timeout": 1.0}}

    def test_environment_config_without_default(self, mock_toml_files) -> None:
        mock_toml_files({"test.toml": "[http]\ntimeout = 1.5"})
        assert load_config() == {"http": {"timeout": 1.5}}
