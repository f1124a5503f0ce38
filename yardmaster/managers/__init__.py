"""
Managers Package

Application configuration management.
"""

from .config_manager import (
    ConfigManager, ConfigData, BuilderConfig, LayoutConfig, LoggingConfig, ConfigurationError
)

__all__ = [
    'ConfigManager',
    'ConfigData',
    'BuilderConfig',
    'LayoutConfig',
    'LoggingConfig',
    'ConfigurationError',
]
