"""Configuration management for Pomotask CLI."""

import json
from pathlib import Path
from typing import Any, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError


class TimerConfig(BaseModel):
    """Timer configuration."""

    alert_enabled: bool = Field(default=True)
    refresh_per_second: int = Field(default=4, ge=1, le=20)


class StorageConfig(BaseModel):
    """Storage configuration."""

    state_dir: Optional[str] = Field(default=None)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="table")


class Config(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class ConfigManager:
    """Manages Pomotask CLI configuration."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = Path(config_dir or user_config_dir("pomotask"))
        self.config_file = self.config_dir / "config.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError, TypeError):
                # If config is corrupted, return default
                return Config()
        return Config()

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            ValueError: If the key is unknown or the value fails validation
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise ValueError(f"Unknown configuration key: {key}")
            current = current[k]
        if keys[-1] not in current:
            raise ValueError(f"Unknown configuration key: {key}")

        current[keys[-1]] = value

        try:
            new_config = Config(**config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for {key}: {e.errors()[0]['msg']}") from e

        self._config = new_config
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
            self.save_config()
            return

        default_value = self.get_from_config(Config(), key)
        self.set(key, default_value)

    def has_key(self, key: str) -> bool:
        """Check whether a dot-separated key names a configuration field."""
        value: Any = self.config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                return False
            value = getattr(value, k)
        return True

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def reset_config_manager() -> None:
    """Forget the cached config manager."""
    global _config_manager
    _config_manager = None
