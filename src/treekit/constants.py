"""
Shared constants for treekit.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

ENV_PREFIX = "TREEKIT_"
"""Prefix for all environment variables read by the settings layer."""

DEFAULT_MAP_TYPE = "txt"
"""Default file extension for map_directory when built from settings."""

DEFAULT_LOG_LEVEL = "WARNING"
"""Default level for the treekit package logger."""

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
"""Default format for the handler installed by configure_logging."""

PROJECT_CONFIG_DIR = ".treekit"
"""Directory under a project root holding the project config.yaml."""
