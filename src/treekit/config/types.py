"""Configuration type definitions for treekit settings.

These are the "config section" models nested within Settings:

- LoggingConfig: level, format
- MapperConfig: default_type

All types use `extra="allow"` so unknown keys survive validation and can
be audited with `get_extra_fields()`.
"""

import typing as _typing

import pydantic as _pydantic

import treekit.constants as constants

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are preserved rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """
        Return fields that were provided but not in the schema.

        Returns:
            Dict of field_name → value for all unrecognized fields.
        """
        return dict(self.model_extra) if self.model_extra else {}


class LoggingConfig(ConfigBase):
    """Package logger configuration."""

    level: str = constants.DEFAULT_LOG_LEVEL
    format: str = constants.DEFAULT_LOG_FORMAT

    @_pydantic.field_validator("level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


class MapperConfig(ConfigBase):
    """Defaults for map_directory."""

    default_type: str = constants.DEFAULT_MAP_TYPE

    @_pydantic.field_validator("default_type")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value.lstrip("."):
            raise ValueError("default_type must name an extension")
        return value
