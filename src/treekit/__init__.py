"""
treekit - value and directory-tree utilities.

Three independent helpers:

- clone: deep copy of nested sequences and mappings
- extend: recursive merge of one value into another
- map_directory: index the files of one extension under a directory
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("treekit")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "treekit Contributors"

from treekit.copying import clone  # noqa: E402
from treekit.kinds import ValueKind, kind_of  # noqa: E402
from treekit.logsetup import configure_logging  # noqa: E402
from treekit.mapper import (  # noqa: E402
    DirectoryMap,
    FileEntry,
    FilesystemAccessError,
    MapOptions,
    map_directory,
)
from treekit.merge import extend  # noqa: E402
from treekit.paths import ensure_trailing_separator  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "DirectoryMap",
    "FileEntry",
    "FilesystemAccessError",
    "MapOptions",
    "ValueKind",
    "clone",
    "configure_logging",
    "ensure_trailing_separator",
    "extend",
    "kind_of",
    "map_directory",
]
