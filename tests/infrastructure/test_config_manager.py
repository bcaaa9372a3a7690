#!/usr/bin/env python3
"""Tests for the ConfigManager module."""

import pytest
import yaml

from noisefilter.core.constants import ErrorCode
from noisefilter.infrastructure.config_manager import (
    ConfigError,
    ConfigManager,
    ConfigSource,
    ConfigValue,
    get_config_manager,
    set_global_config,
)


class TestConfigSource:
    """Tests for ConfigSource enum."""

    def test_precedence_order(self):
        """Test config source precedence ordering."""
        assert (
            ConfigSource.COMPILED_DEFAULTS.value
            < ConfigSource.USER_CONFIG.value
            < ConfigSource.ENVIRONMENT.value
            < ConfigSource.RUNTIME.value
        )


class TestConfigError:
    """Tests for ConfigError."""

    def test_default_code(self):
        error = ConfigError("bad")
        assert error.message == "bad"
        assert error.error_code == ErrorCode.INVALID_INPUT


class TestConfigManagerDefaults:
    """Tests for compiled defaults."""

    def test_defaults(self):
        """Test default values are available."""
        config = ConfigManager(load_environment=False)
        assert config.get("noisefilter.ignore_file") is None
        assert config.get("noisefilter.encoding") == "utf-8-sig"
        assert config.get("noisefilter.logging.level") == "INFO"

    def test_missing_key_default(self):
        """Test default returned for unknown keys."""
        config = ConfigManager(load_environment=False)
        assert config.get("noisefilter.nope", default=5) == 5
        assert config.get("noisefilter.logging.level.deeper") is None

    def test_defaults_not_shared(self):
        """Test runtime changes do not leak into other managers."""
        first = ConfigManager(load_environment=False)
        first.set("noisefilter.logging.level", "DEBUG", ConfigSource.COMPILED_DEFAULTS)
        second = ConfigManager(load_environment=False)
        assert second.get("noisefilter.logging.level") == "INFO"


class TestLoadFile:
    """Tests for YAML file loading."""

    def test_load_file(self, config_file):
        """Test values from a YAML file override defaults."""
        config = ConfigManager(str(config_file), load_environment=False)
        assert config.get("noisefilter.encoding") == "utf-8"
        assert config.get("noisefilter.logging.level") == "DEBUG"

    def test_null_does_not_override(self, config_file):
        """Test null values in the file leave defaults in place."""
        config = ConfigManager(str(config_file), load_environment=False)
        assert config.get_all()["noisefilter"]["logging"]["file"] is None
        assert config.get("noisefilter.ignore_file") is None

    def test_missing_file(self, temp_dir):
        """Test missing file raises NOT_FOUND."""
        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError) as exc_info:
            config.load_file(str(temp_dir / "missing.yaml"))
        assert exc_info.value.error_code == ErrorCode.NOT_FOUND

    def test_invalid_yaml(self, temp_dir):
        """Test YAML syntax errors raise INVALID_INPUT."""
        path = temp_dir / "bad.yaml"
        path.write_text("noisefilter: [unclosed\n")
        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError, match="YAML parse error") as exc_info:
            config.load_file(str(path))
        assert exc_info.value.error_code == ErrorCode.INVALID_INPUT

    def test_non_mapping_yaml(self, temp_dir):
        """Test a YAML list is rejected."""
        path = temp_dir / "list.yaml"
        path.write_text(yaml.dump(["a", "b"]))
        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError, match="Invalid config format"):
            config.load_file(str(path))

    def test_directory_path(self, temp_dir):
        """Test unreadable path raises INTERNAL_ERROR."""
        config = ConfigManager(load_environment=False)
        with pytest.raises(ConfigError) as exc_info:
            config.load_file(str(temp_dir))
        assert exc_info.value.error_code == ErrorCode.INTERNAL_ERROR


class TestEnvironment:
    """Tests for NOISEFILTER_* environment variables."""

    def test_top_level_key(self, monkeypatch):
        """Test single-underscore names map to one key."""
        monkeypatch.setenv("NOISEFILTER_IGNORE_FILE", "/tmp/ignore.txt")
        config = ConfigManager()
        assert config.get("noisefilter.ignore_file") == "/tmp/ignore.txt"

    def test_nested_key(self, monkeypatch):
        """Test double underscore nests keys."""
        monkeypatch.setenv("NOISEFILTER_LOGGING__LEVEL", "ERROR")
        config = ConfigManager()
        assert config.get("noisefilter.logging.level") == "ERROR"

    def test_environment_overrides_file(self, monkeypatch, config_file):
        """Test environment beats the config file."""
        monkeypatch.setenv("NOISEFILTER_LOGGING__LEVEL", "WARNING")
        config = ConfigManager(str(config_file))
        value = config.get_value("noisefilter.logging.level")
        assert isinstance(value, ConfigValue)
        assert value.value == "WARNING"
        assert value.source == ConfigSource.ENVIRONMENT

    def test_malformed_name_ignored(self, monkeypatch):
        """Test empty key segments are skipped."""
        monkeypatch.setenv("NOISEFILTER_LOGGING__", "x")
        config = ConfigManager()
        assert config.get("noisefilter.logging.level") == "INFO"

    def test_disabled(self, monkeypatch):
        """Test environment can be ignored."""
        monkeypatch.setenv("NOISEFILTER_LOGGING__LEVEL", "ERROR")
        config = ConfigManager(load_environment=False)
        assert config.get("noisefilter.logging.level") == "INFO"

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("true", True),
            ("No", False),
            ("42", 42),
            ("1.5", 1.5),
            ("null", None),
            ("utf-8", "utf-8"),
        ],
    )
    def test_parse_env_value(self, raw, expected):
        """Test environment value parsing."""
        config = ConfigManager(load_environment=False)
        assert config._parse_env_value(raw) == expected


class TestSetAndMerge:
    """Tests for runtime updates and merging."""

    def test_set_runtime(self):
        """Test runtime values take precedence."""
        config = ConfigManager(load_environment=False)
        config.set("noisefilter.ignore_file", "runtime.txt")
        assert config.get("noisefilter.ignore_file") == "runtime.txt"
        assert config.get_value("noisefilter.ignore_file").source == ConfigSource.RUNTIME

    def test_load_dict(self):
        """Test loading a dictionary copies it."""
        data = {"noisefilter": {"encoding": "latin-1"}}
        config = ConfigManager(load_environment=False)
        config.load_dict(data)
        data["noisefilter"]["encoding"] = "changed"
        assert config.get("noisefilter.encoding") == "latin-1"

    def test_get_all_deep_merge(self):
        """Test merged config combines nested sections."""
        config = ConfigManager(load_environment=False)
        config.set("noisefilter.logging.file", "out.log")
        merged = config.get_all()
        assert merged["noisefilter"]["logging"] == {"level": "INFO", "file": "out.log"}
        assert merged["noisefilter"]["encoding"] == "utf-8-sig"

    def test_clear_keeps_defaults(self):
        """Test clearing drops everything but defaults."""
        config = ConfigManager(load_environment=False)
        config.set("noisefilter.encoding", "latin-1")
        config.clear()
        assert config.get("noisefilter.encoding") == "utf-8-sig"

    def test_clear_single_source(self, config_file):
        """Test clearing one source."""
        config = ConfigManager(str(config_file), load_environment=False)
        config.set("noisefilter.encoding", "latin-1")
        config.clear(ConfigSource.RUNTIME)
        assert config.get("noisefilter.encoding") == "utf-8"


class TestValidate:
    """Tests for validate()."""

    def test_valid(self, config_file):
        config = ConfigManager(str(config_file), load_environment=False)
        assert config.validate() is True

    def test_invalid(self):
        config = ConfigManager(load_environment=False)
        config.set("noisefilter.logging.level", "LOUD")
        with pytest.raises(ConfigError, match="Invalid log level"):
            config.validate()


class TestGlobalConfig:
    """Tests for global config helpers."""

    def test_get_config_manager_singleton(self):
        assert get_config_manager() is get_config_manager()

    def test_set_global_config(self):
        custom = ConfigManager(load_environment=False)
        set_global_config(custom)
        assert get_config_manager() is custom
