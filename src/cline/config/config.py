"""
Configuration management for cline.

Provides a configuration file at ~/.cline/config.json for default settings.
The library itself never reads it implicitly: pass a Config to Dispatcher,
or use get_config() from host code.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


# Default values - single source of truth
DEFAULTS = {
    "on_duplicate": "overwrite",
    "prompt": ">> ",
    "verbose": False,
    "log_level": "DEBUG",
}


class Config(BaseModel):
    """Configuration settings for cline.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Registration settings
    on_duplicate: Optional[Literal["overwrite", "error"]] = Field(
        default=None,
        description="Re-registering a path: 'overwrite' (last wins) or 'error'"
    )

    # REPL settings
    prompt: Optional[str] = Field(
        default=None,
        description="Prompt shown by cline_run"
    )
    verbose: Optional[bool] = Field(
        default=None,
        description="Log registration and dispatch to stderr"
    )
    log_level: Optional[str] = Field(
        default=None,
        description="Log level used when verbose is enabled"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)


class ConfigManager:
    """Manages loading and saving configuration."""

    CONFIG_DIR = Path.home() / ".cline"
    CONFIG_FILE = CONFIG_DIR / "config.json"

    def __init__(self):
        self._config: Optional[Config] = None

    def _ensure_dir(self) -> None:
        """Ensure config directory exists."""
        self.CONFIG_DIR.mkdir(parents=True, exist_ok=True)

    def _read_raw(self) -> dict[str, Any]:
        if not self.CONFIG_FILE.exists():
            return {}
        try:
            return json.loads(self.CONFIG_FILE.read_text())
        except json.JSONDecodeError:
            return {}

    def _write_raw(self, data: dict[str, Any]) -> None:
        self._ensure_dir()
        self.CONFIG_FILE.write_text(json.dumps(data, indent=2) + "\n")

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self, create_if_missing: bool = False) -> Config:
        """Load configuration from file.

        Args:
            create_if_missing: If True, create default config file if it doesn't exist.

        Returns:
            Config object with loaded settings, or defaults if file doesn't exist.
        """
        if not self.CONFIG_FILE.exists():
            if create_if_missing:
                self._create_default_config()
            return Config()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValueError) as e:
            logger.warning(f"Invalid config file {self.CONFIG_FILE} ({e}), using defaults")
            return Config()

    def _create_default_config(self) -> None:
        """Create default config file with actual default values."""
        default_config = {"_comment": "cline configuration file"}
        default_config.update(DEFAULTS)
        self._write_raw(default_config)

    def save(self, config: Optional[Config] = None) -> Path:
        """Save configuration to file, preserving existing structure.

        Args:
            config: Config to save. If None, saves current config.

        Returns:
            Path to saved config file.
        """
        if config is not None:
            self._config = config
        if self._config is None:
            self._config = Config()

        # Update only non-None values, keeping comments and unknown keys
        existing_data = self._read_raw()
        for key, value in self._config.model_dump().items():
            if value is not None:
                existing_data[key] = value

        self._write_raw(existing_data)
        return self.CONFIG_FILE

    def set(self, key: str, value: Any) -> None:
        """Set a config value and save.

        Raises:
            ValueError: Unknown key, or a value the field does not accept.
        """
        self._config = self.load()

        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        data = self._config.model_dump()
        data[key] = value
        self._config = Config.model_validate(data)
        self.save()

    def unset(self, key: str) -> None:
        """Remove a config value (reset to default)."""
        self._config = self.load()

        if key not in Config.model_fields:
            raise ValueError(f"Unknown config key: {key}")

        setattr(self._config, key, None)

        existing_data = self._read_raw()
        if key in existing_data:
            existing_data[key] = None
            self._write_raw(existing_data)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback."""
        return self.config.get(key, default)

    def list_settings(self) -> dict[str, Any]:
        """List user-customized settings (values that differ from defaults)."""
        result = {}
        for k, v in self.config.model_dump().items():
            if v is None:
                continue
            if k not in DEFAULTS or v != DEFAULTS[k]:
                result[k] = v
        return result

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = Config()
        if self.CONFIG_FILE.exists():
            self.CONFIG_FILE.unlink()


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
