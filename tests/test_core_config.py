"""
Unit tests for core configuration - Imperative style.

Tests configuration loading, validation, and defaults.
"""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from gf_metadata.core.config import MetadataConfig, load_config_from_yaml
from gf_metadata.core.exceptions import (
    ConfigFileNotFoundError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
)


class TestMetadataConfig:
    """Test MetadataConfig validation."""

    def test_defaults(self, monkeypatch):
        """Test configuration defaults."""
        for key in ("GF_METADATA_REPO_DIR", "GF_METADATA_FAMILY_FILTER", "GF_METADATA_LOG_LEVEL"):
            monkeypatch.delenv(key, raising=False)

        config = MetadataConfig(_env_file=None)

        assert config.repo_dir is None
        assert config.family_filter is None
        assert config.family_pattern is None
        assert config.default_language == "en_Latn"
        assert config.synthesize_designers is True
        assert config.log_level == "INFO"

    def test_env_vars(self, monkeypatch):
        """Test settings are read from prefixed environment variables."""
        monkeypatch.setenv("GF_METADATA_REPO_DIR", "/srv/fonts")
        monkeypatch.setenv("GF_METADATA_FAMILY_FILTER", "ofl/.*")
        monkeypatch.setenv("GF_METADATA_LOAD_AXES", "false")

        config = MetadataConfig(_env_file=None)

        assert config.repo_dir == Path("/srv/fonts")
        assert config.family_pattern.search("/srv/fonts/ofl/lora/METADATA.pb")
        assert config.load_axes is False

    def test_invalid_family_filter(self):
        """Test the family filter must compile."""
        with pytest.raises(ValidationError):
            MetadataConfig(_env_file=None, family_filter="ofl/(")

    def test_log_level(self):
        """Test log levels are validated and upper-cased."""
        assert MetadataConfig(_env_file=None, log_level="debug").log_level == "DEBUG"

        with pytest.raises(ValidationError):
            MetadataConfig(_env_file=None, log_level="chatty")


class TestYamlLoading:
    """Test YAML configuration files."""

    def test_from_yaml(self, temp_dir):
        """Test loading from a YAML file."""
        config_path = temp_dir / "gf.yaml"
        with open(config_path, "w") as f:
            yaml.dump({"repo_dir": str(temp_dir), "default_language": "fr_Latn"}, f)

        config = MetadataConfig.from_yaml(config_path)

        assert config.repo_dir == temp_dir
        assert config.default_language == "fr_Latn"
        assert isinstance(config, MetadataConfig)

    def test_missing_file(self, temp_dir):
        with pytest.raises(ConfigFileNotFoundError):
            load_config_from_yaml(temp_dir / "missing.yaml", MetadataConfig)

    def test_empty_file(self, temp_dir):
        config_path = temp_dir / "empty.yaml"
        config_path.write_text("")

        with pytest.raises(EmptyConfigFileError):
            load_config_from_yaml(config_path, MetadataConfig)

    def test_invalid_yaml(self, temp_dir):
        config_path = temp_dir / "bad.yaml"
        config_path.write_text("repo_dir: [unclosed\n")

        with pytest.raises(InvalidYamlError):
            load_config_from_yaml(config_path, MetadataConfig)

    def test_invalid_values(self, temp_dir):
        """Test validation failures surface as configuration errors."""
        config_path = temp_dir / "bad-values.yaml"
        config_path.write_text("log_level: chatty\n")

        with pytest.raises(ConfigurationError):
            MetadataConfig.from_yaml(config_path)

    def test_from_env_and_yaml_without_file(self, temp_dir, monkeypatch):
        """Test falling back to the environment when no YAML is given."""
        monkeypatch.setenv("GF_METADATA_DEFAULT_LANGUAGE", "de_Latn")

        config = MetadataConfig.from_env_and_yaml(env_file=str(temp_dir / "none.env"))

        assert config.default_language == "de_Latn"
