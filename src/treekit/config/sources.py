"""Custom pydantic-settings source for treekit configuration.

LayeredYamlSettingsSource loads configuration from layered YAML files and
folds them together with treekit.merge.extend, so nested sections merge
key by key while scalars and lists from a higher layer replace lower ones.

Configuration layers (in precedence order, highest first):
1. Environment variables (handled by pydantic-settings)
2. Project config: .treekit/config.yaml in project root
3. User config: ~/.config/treekit/config.yaml (or TREEKIT_CONFIG_DIR)
4. Built-in defaults: bundled config.yaml

Environment variables:
- TREEKIT_CONFIG_DIR: Override user config directory (default: ~/.config/treekit)
"""

import collections.abc as _abc
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import treekit.copying as copying
import treekit.constants as constants
import treekit.merge as merge

_logger = _logging.getLogger(__name__)

# Environment variable for overriding user config directory
ENV_CONFIG_DIR = "TREEKIT_CONFIG_DIR"


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


def get_builtin_defaults_path() -> _pathlib.Path:
    """Get the path to the built-in defaults config file."""
    return _pathlib.Path(__file__).parent / "defaults" / "config.yaml"


def get_user_config_dir() -> _pathlib.Path:
    """Get the user config directory, respecting TREEKIT_CONFIG_DIR."""
    config_dir_env = _os.environ.get(ENV_CONFIG_DIR)
    if config_dir_env:
        return _pathlib.Path(config_dir_env)
    return _pathlib.Path.home() / ".config" / "treekit"


def get_user_config_path() -> _pathlib.Path:
    """Get the path to the user config file."""
    return get_user_config_dir() / "config.yaml"


def get_project_config_path(project_root: _pathlib.Path) -> _pathlib.Path:
    """Get the path to a project's config file."""
    return project_root / constants.PROJECT_CONFIG_DIR / "config.yaml"


def load_yaml_file(path: _pathlib.Path) -> dict[str, _typing.Any] | None:
    """
    Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents, or None if the file is empty.

    Raises:
        ConfigFileError: If the file cannot be read, is malformed YAML,
            or contains non-dict content at the top level.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigFileError(path, f"permission denied: {e}") from e
    except OSError as e:
        raise ConfigFileError(path, f"cannot read file: {e}") from e

    try:
        parsed = _yaml.safe_load(content)
    except _yaml.YAMLError as e:
        raise ConfigFileError(path, f"invalid YAML: {e}") from e

    if parsed is None:
        return None

    if not isinstance(parsed, dict):
        type_name = type(parsed).__name__
        raise ConfigFileError(
            path,
            f"config must be a YAML mapping (dict), got {type_name}",
        )

    return parsed


class LayeredYamlSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source that merges layered YAML config files with extend.

    After merging, the result is a plain dict that Pydantic validates and
    converts to typed objects.

    Layers (lowest to highest precedence):
    1. Built-in defaults (src/treekit/config/defaults/config.yaml)
    2. User config (~/.config/treekit/config.yaml)
    3. Project config (.treekit/config.yaml)
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        project_root: _pathlib.Path | None = None,
        *,
        user_config_path: _pathlib.Path | None = None,
        builtin_config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            project_root: Optional project root path for project-level config.
            user_config_path: Override path for user config file (for testing).
            builtin_config_path: Override path for builtin defaults (for testing).
        """
        super().__init__(settings_cls)
        self._project_root = project_root
        self._user_config_path = user_config_path
        self._builtin_config_path = builtin_config_path
        # (layer_name, path) in ascending precedence
        self._loaded_layers: list[tuple[str, _pathlib.Path]] = []
        self._merged = self._load_config_layers()

    def _load_config_layers(self) -> dict[str, _typing.Any]:
        """Load each config file and fold them, lowest precedence first."""
        # Built-in defaults are REQUIRED: missing or empty means a broken install
        builtin_path = self._builtin_config_path or get_builtin_defaults_path()
        if not builtin_path.exists():
            raise ConfigFileError(
                builtin_path,
                "built-in defaults not found (possible installation problem)",
            )
        merged = load_yaml_file(builtin_path)
        if not merged:
            raise ConfigFileError(
                builtin_path,
                "built-in defaults file is empty (possible installation problem)",
            )
        self._loaded_layers.append(("built-in", builtin_path))

        optional: list[tuple[str, _pathlib.Path]] = [
            ("user", self._user_config_path or get_user_config_path()),
        ]
        if self._project_root is not None:
            optional.append(("project", get_project_config_path(self._project_root)))

        for name, path in optional:
            if not path.exists():
                continue
            content = load_yaml_file(path)
            if not content:
                continue
            _logger.debug("Merging %s config from %s", name, path)
            merged = merge.extend(merged, content, in_place=True)
            self._loaded_layers.append((name, path))

        return _typing.cast(dict[str, _typing.Any], merged)

    def get_loaded_layers(self) -> list[tuple[str, _pathlib.Path]]:
        """
        Get info about layers that were actually loaded.

        Returns:
            List of (layer_name, path) tuples, lowest precedence first.
        """
        return list(self._loaded_layers)

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,  # noqa: ARG002 - required by pydantic-settings interface
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """
        Get value for a field from the merged layers.

        Returns:
            Tuple of (value, field_name, is_complex).
        """
        value = self._merged.get(field_name)
        if value is None:
            return None, field_name, False
        return value, field_name, isinstance(value, (_abc.Mapping, list))

    def __call__(self) -> dict[str, _typing.Any]:
        """Return the merged config as a plain dict for Pydantic validation."""
        return _typing.cast(dict[str, _typing.Any], copying.clone(self._merged))
