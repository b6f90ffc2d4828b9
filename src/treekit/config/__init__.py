"""
Configuration module for treekit.

Uses pydantic-settings for environment variable loading and layered
YAML config files merged with treekit.merge.extend.
"""

from treekit.config.settings import Settings
from treekit.config.sources import ConfigFileError, LayeredYamlSettingsSource
from treekit.config.types import ConfigBase, LoggingConfig, MapperConfig

__all__ = [
    "ConfigBase",
    "ConfigFileError",
    "LayeredYamlSettingsSource",
    "LoggingConfig",
    "MapperConfig",
    "Settings",
]
