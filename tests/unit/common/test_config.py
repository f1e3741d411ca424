"""Tests for configuration module."""

import pytest

from vcsbackends.common.config import (
    CONFIG_ENV_VAR,
    DEFAULT_LOG_DIR,
    LoggingConfig,
    VCSBackendsConfig,
    default_config_path,
    load_config,
    load_typed_config,
    parse_config,
    parse_logging_config,
)


class TestParseConfig:
    """Tests for configuration parsing."""

    def test_parse_full_config(self, sample_config):
        config = parse_config(sample_config)

        assert config.executables["git"] == "/usr/local/bin/git"
        assert config.executables["hg"] == "/opt/mercurial/bin/hg"
        assert config.capture_output is False
        assert config.logging.level == "DEBUG"
        assert config.logging.file_logging is True

    def test_parse_empty_config(self):
        """Test defaults for an empty configuration."""
        config = parse_config({})

        assert config.executables == {}
        assert config.capture_output is True
        assert config.logging == LoggingConfig()

    def test_parse_null_executables(self):
        config = parse_config({"executables": None})

        assert config.executables == {}

    def test_parse_invalid_executables(self):
        with pytest.raises(TypeError):
            parse_config({"executables": ["git"]})

    def test_parse_logging_defaults(self):
        logging_config = parse_logging_config({"level": "WARNING"})

        assert logging_config.level == "WARNING"
        assert logging_config.log_dir == DEFAULT_LOG_DIR
        assert logging_config.console_logging is True


class TestLoadConfig:
    """Tests for loading configuration from files."""

    def test_load_yaml_config(self, tmp_path):
        """Test loading YAML configuration."""
        config_content = """
executables:
  fossil: /usr/local/bin/fossil
capture_output: true
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)

        config_dict = load_config(str(config_file))

        assert config_dict["executables"]["fossil"] == "/usr/local/bin/fossil"
        assert config_dict["capture_output"] is True

    def test_load_config_nonexistent(self, tmp_path):
        """Test loading nonexistent config raises error."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nonexistent.yaml"))

    def test_load_empty_file(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config(str(config_file)) == {}

    def test_load_non_mapping_root(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- git\n- hg\n")

        with pytest.raises(TypeError):
            load_config(str(config_file))

    def test_load_config_env_expansion(self, tmp_path, monkeypatch):
        """Test environment variable expansion."""
        monkeypatch.setenv("TOOLS_DIR", "/opt/tools")

        config_content = """
executables:
  darcs: ${TOOLS_DIR}/bin/darcs
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)

        config_dict = load_config(str(config_file))

        assert config_dict["executables"]["darcs"] == "/opt/tools/bin/darcs"

    def test_default_path_from_env(self, tmp_path, monkeypatch):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("capture_output: false\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        assert default_config_path() == str(config_file)
        assert load_config() == {"capture_output": False}

    def test_load_typed_config(self, tmp_path):
        """Test loading typed configuration."""
        config_content = """
executables:
  svn: /usr/bin/svn
logging:
  level: ERROR
"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(config_content)

        config = load_typed_config(str(config_file))

        assert isinstance(config, VCSBackendsConfig)
        assert config.executables == {"svn": "/usr/bin/svn"}
        assert config.logging.level == "ERROR"
