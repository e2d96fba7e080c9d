"""Configuration management for the metadata access layer."""

import logging
import re
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidFamilyFilterError,
    InvalidLogLevelError,
    InvalidYamlError,
)


class MetadataConfig(BaseSettings):
    """Settings for locating and loading Google Fonts metadata."""

    model_config = SettingsConfigDict(
        env_prefix="GF_METADATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    repo_dir: Path | None = Field(None, description="Local checkout of the google/fonts repo")
    family_filter: str | None = Field(
        None, description="Regular expression matched against METADATA.pb paths"
    )
    default_language: str = Field("en_Latn", description="Last resort primary language")
    synthesize_designers: bool = Field(
        True, description="Create bare designer records for names missing from the catalog"
    )
    load_languages: bool = Field(True, description="Load bundled gflanguages data")
    load_axes: bool = Field(True, description="Load the bundled axis registry")
    log_level: str = Field("INFO", description="Log level")

    @field_validator("family_filter")
    @classmethod
    def validate_family_filter(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            re.compile(v)
        except re.error as e:
            raise InvalidFamilyFilterError(v, str(e)) from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidLogLevelError(v)
        return level

    @property
    def family_pattern(self) -> re.Pattern | None:
        """Compiled family filter, if any."""
        return re.compile(self.family_filter) if self.family_filter else None

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "MetadataConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "MetadataConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        if issubclass(config_class, BaseSettings):
            # YAML values win; don't pick up a stray .env for this instance
            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e
