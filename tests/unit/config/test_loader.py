"""Unit tests for TOML configuration loader."""

import tomllib
from pathlib import Path

import pytest

from formcheck.config.loader import (
    ConfigurationError,
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
        base = {"verification": {"base_url": "a", "timeout": 5}, "app_name": "x"}
        override = {"verification": {"timeout": 20}}
        result = deep_merge(base, override)
        assert result == {"verification": {"base_url": "a", "timeout": 20}, "app_name": "x"}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict values in override replace base values."""
        assert deep_merge({"a": {"x": 1}}, {"a": "replaced"}) == {"a": "replaced"}

    def test_base_unmodified(self) -> None:
        """Original base dictionary is not modified."""
        base = {"a": 1}
        deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadToml:
    """Tests for load_toml function."""

    def test_load_valid_toml(self, tmp_path: Path) -> None:
        """Valid TOML file is loaded correctly."""
        toml_file = tmp_path / "test.toml"
        toml_file.write_text('[verification]\ndefault_country = "IE"')
        assert load_toml(toml_file) == {"verification": {"default_country": "IE"}}

    def test_load_missing_file_raises(self, tmp_path: Path) -> None:
        """Missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_toml(tmp_path / "nonexistent.toml")

    def test_load_invalid_toml_raises(self, tmp_path: Path) -> None:
        """Invalid TOML syntax raises error."""
        invalid_file = tmp_path / "invalid.toml"
        invalid_file.write_text("invalid = [unclosed")
        with pytest.raises(tomllib.TOMLDecodeError):
            load_toml(invalid_file)


class TestGetEnvironment:
    """Tests for get_environment function."""

    def test_returns_env_var_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Returns FORMCHECK_ENV value when set."""
        monkeypatch.setenv("FORMCHECK_ENV", "production")
        assert get_environment() == "production"

    def test_defaults_to_development(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults to 'development' when FORMCHECK_ENV not set."""
        monkeypatch.delenv("FORMCHECK_ENV", raising=False)
        assert get_environment() == "development"


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_uses_env_var_when_set(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Uses FORMCHECK_CONFIG_DIR when set."""
        monkeypatch.setenv("FORMCHECK_CONFIG_DIR", str(test_config_dir))
        assert get_config_dir().resolve() == test_config_dir.resolve()

    def test_raises_for_missing_env_dir(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Raises ConfigurationError when FORMCHECK_CONFIG_DIR doesn't exist."""
        monkeypatch.setenv("FORMCHECK_CONFIG_DIR", str(tmp_path / "missing"))
        with pytest.raises(ConfigurationError):
            get_config_dir()

    def test_searches_parent_directories(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Finds config/ in a parent of the working directory."""
        nested = test_config_dir.parent / "app" / "sub"
        nested.mkdir(parents=True)
        monkeypatch.delenv("FORMCHECK_CONFIG_DIR", raising=False)
        monkeypatch.chdir(nested)
        assert get_config_dir().resolve() == test_config_dir.resolve()


class TestLoadConfig:
    """Tests for load_config function."""

    def test_merges_environment_config(
        self,
        test_config_dir: Path,
        mock_toml_files,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Environment config overrides default config."""
        mock_toml_files({
            "default.toml": "[verification]\ndefault_country = 'GB'\ntimeout = 5.0",
            "staging.toml": "[verification]\ndefault_country = 'IE'",
        })
        monkeypatch.setenv("FORMCHECK_CONFIG_DIR", str(test_config_dir))
        monkeypatch.setenv("FORMCHECK_ENV", "staging")

        assert load_config() == {"verification": {"default_country": "IE", "timeout": 5.0}}

    def test_missing_files_give_empty_config(
        self, test_config_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A config directory without TOML files yields an empty mapping."""
        monkeypatch.setenv("FORMCHECK_CONFIG_DIR", str(test_config_dir))
        assert load_config() == {}
