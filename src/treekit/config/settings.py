"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with TREEKIT_ prefix
3. .env file (if TREEKIT_ENV_FILE points at one)
4. Layered YAML config files merged with extend:
   - Project config: .treekit/config.yaml (highest)
   - User config: ~/.config/treekit/config.yaml
   - Built-in defaults: bundled defaults/config.yaml (lowest)

Nested config uses double underscore delimiter:
  TREEKIT_LOGGING__LEVEL=DEBUG
  TREEKIT_MAPPER__DEFAULT_TYPE=md
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import treekit.config.sources as sources
import treekit.config.types as types
import treekit.constants as constants


def _get_env_file() -> str | None:
    """Return TREEKIT_ENV_FILE if it names an existing file."""
    env_file = _os.environ.get("TREEKIT_ENV_FILE")
    if env_file and _pathlib.Path(env_file).exists():
        return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    treekit configuration settings.

    All settings can be overridden via environment variables with TREEKIT_
    prefix. For nested config, use double underscore:
    TREEKIT_MAPPER__DEFAULT_TYPE=md

    The project root for .treekit/config.yaml is the working directory.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="allow",
    )

    logging: types.LoggingConfig = _pydantic.Field(default_factory=types.LoggingConfig)
    mapper: types.MapperConfig = _pydantic.Field(default_factory=types.MapperConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args), highest
        2. env_settings (TREEKIT_* env vars)
        3. dotenv_settings (.env file)
        4. yaml layers merged with extend
        5. (defaults via Field definitions), lowest
        """
        project_root = _pathlib.Path.cwd()
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.LayeredYamlSettingsSource(settings_cls, project_root),
            file_secret_settings,
        )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings without loading a .env file (test isolation)."""
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]
