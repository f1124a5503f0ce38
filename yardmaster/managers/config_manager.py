"""
Configuration management for Yardmaster.

This module handles loading, saving, and validating application configuration
using Pydantic models for type safety and validation.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from version import __version__

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "YARDMASTER_CONFIG"


class BuilderConfig(BaseModel):
    """Configuration for the train builder."""

    random_seed: Optional[int] = Field(None, description="Seed for destination draws")
    warn_on_full_track: bool = True
    virtual_yard_prefix: str = "virtual-yard-"


class LayoutConfig(BaseModel):
    """Configuration for explicit car placement."""

    enforce_track_capacity: bool = True


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = "INFO"
    log_file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level


class ConfigData(BaseModel):
    """Main configuration data model."""

    builder: BuilderConfig = BuilderConfig()
    layout: LayoutConfig = LayoutConfig()
    logging: LoggingConfig = LoggingConfig()


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    pass


class ConfigManager:
    """
    Manages application configuration with file persistence.

    Handles loading configuration from JSON files, creating default
    configurations, and saving changes back to disk.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file. If None, uses
                ``$YARDMASTER_CONFIG`` or the user config directory
        """
        if config_path is None:
            self.config_path = self.get_default_config_path()
        else:
            self.config_path = Path(config_path)
        self.config: Optional[ConfigData] = None

        logger.debug(f"ConfigManager initialized with path: {self.config_path}")

    @staticmethod
    def get_default_config_path() -> Path:
        """
        Get the default configuration file path.

        Uses $YARDMASTER_CONFIG when set. Otherwise on Windows uses
        AppData/Roaming/Yardmaster/config.json, elsewhere
        XDG_CONFIG_HOME/Yardmaster/config.json or ~/.config/Yardmaster/config.json

        Returns:
            Path: Default configuration file path
        """
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override)

        if os.name == "nt":  # Windows
            appdata = os.environ.get("APPDATA")
            if appdata:
                return Path(appdata) / "Yardmaster" / "config.json"
            return Path("config.json")

        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            config_dir = Path(xdg_config) / "Yardmaster"
        else:
            config_dir = Path.home() / ".config" / "Yardmaster"
        return config_dir / "config.json"

    def load_config(self) -> ConfigData:
        """
        Load configuration from file.

        If the configuration file doesn't exist, creates a default one.

        Returns:
            ConfigData: The loaded configuration

        Raises:
            ConfigurationError: If the configuration file is invalid
        """
        logger.debug(f"Loading config from: {self.config_path}")

        if not self.config_path.exists():
            logger.info(f"Config file doesn't exist, creating default at: {self.config_path}")
            self.create_default_config()
            return self.config or ConfigData()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self.config = ConfigData(**data)
            logger.debug(f"Successfully loaded config from: {self.config_path}")
            return self.config
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")
        except (OSError, TypeError) as e:
            raise ConfigurationError(f"Failed to load config: {e}")

    def save_config(self, config: ConfigData) -> bool:
        """
        Save configuration to file.

        Args:
            config: Configuration data to save

        Returns:
            bool: True if saved successfully, False otherwise
        """
        logger.info(f"Saving config to: {self.config_path}")

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)

            self.config = config
            logger.info(f"Successfully saved config to: {self.config_path}")
            return True

        except OSError as e:
            logger.error(f"Failed to save config to {self.config_path}: {e}")
            return False

    def create_default_config(self) -> None:
        """Create a default configuration file."""
        default_config = ConfigData()
        if not self.save_config(default_config):
            # Unwritable location: keep running on defaults
            self.config = default_config

    def update_random_seed(self, seed: Optional[int]) -> None:
        """
        Update the destination random seed and save to file.

        Args:
            seed: Seed value, or None for unseeded draws
        """
        if self.config is None:
            self.load_config()

        if self.config:
            self.config.builder.random_seed = seed
            self.save_config(self.config)

    def get_config_summary(self) -> dict:
        """
        Get a summary of current configuration for display.

        Returns:
            dict: Configuration summary
        """
        if self.config is None:
            self.load_config()

        if not self.config:
            return {"error": "Configuration not loaded"}

        seed = self.config.builder.random_seed
        return {
            "app_version": __version__,
            "random_seed": "Unseeded" if seed is None else str(seed),
            "track_capacity": (
                "Enforced" if self.config.layout.enforce_track_capacity else "Permissive"
            ),
            "full_track_warnings": (
                "Enabled" if self.config.builder.warn_on_full_track else "Disabled"
            ),
            "log_level": self.config.logging.level,
        }
