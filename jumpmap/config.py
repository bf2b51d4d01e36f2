"""Configuration management for jumpmap."""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from jumpmap.exceptions import ConfigurationError


# Paths
DEFAULT_CONFIG_PATH = Path("~/.jumpmap/config.yaml").expanduser()
DEFAULT_STORE_PATH = "~/.jumpmap.json"
CONFIG_PATH_ENV = "JUMPMAP_CONFIG"


class StoreConfig(BaseModel):
    """Backing file configuration."""

    path: str = DEFAULT_STORE_PATH


class DisplayConfig(BaseModel):
    """List rendering configuration."""

    exists_marker: str = "✓"
    missing_marker: str = "✗"
    colors: bool = True


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    format: Literal["console", "json"] = "console"


class Config(BaseSettings):
    """Main configuration for jumpmap."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="JUMPMAP_",
        env_nested_delimiter="__",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # JUMPMAP_* variables override values read from YAML.
        return env_settings, init_settings, file_secret_settings

    @classmethod
    def resolve_default_config_path(cls) -> Path:
        """Resolve default config path, honoring ``$JUMPMAP_CONFIG``."""
        explicit = os.environ.get(CONFIG_PATH_ENV, "").strip()
        if explicit:
            return Path(explicit).expanduser()
        return DEFAULT_CONFIG_PATH

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "Config":
        """Load configuration from YAML file."""
        config_path = Path(path).expanduser() if path else cls.resolve_default_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read config '{config_path}': {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config '{config_path}' must be a mapping")

        try:
            return cls(**data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid config '{config_path}': {e}") from e

    @classmethod
    def load(cls) -> "Config":
        """Load configuration; environment variables win over YAML values."""
        return cls.from_yaml()

    def save(self, path: Path | str | None = None) -> None:
        """Save configuration to YAML file."""
        config_path = Path(path) if path else DEFAULT_CONFIG_PATH

        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(exclude_none=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    def store_path(self) -> Path:
        """Resolve the bookmark backing file path."""
        return Path(self.store.path).expanduser()


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (``None`` forces a reload)."""
    global _config
    _config = config
