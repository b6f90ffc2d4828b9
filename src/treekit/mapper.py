"""
Directory-tree file mapping.

map_directory walks a directory tree breadth-first and indexes every file
with a given extension by its path relative to the root:

    >>> import treekit.mapper as mapper
    >>> tree = mapper.map_directory({"path": "/srv/views", "type": "html"})
    >>> tree.root
    '/srv/views'
    >>> sorted(tree)
    ['index.html', 'partials/nav.html']
    >>> tree["partials/nav.html"].base_name
    'nav'

Directories only widen the traversal; they never appear as entries.
Symlinks are followed and there is no depth limit.
"""

from __future__ import annotations

import collections as _collections
import collections.abc as _abc
import dataclasses as _dataclasses
import logging as _logging
import os as _os
import pathlib as _pathlib
import stat as _stat
import types as _types
import typing as _typing

import treekit.config as config_module

_logger = _logging.getLogger(__name__)


class FilesystemAccessError(OSError):
    """A directory could not be listed or a path could not be stat'ed."""

    def __init__(self, path: str | _os.PathLike[str], message: str) -> None:
        self.path = path
        super().__init__(f"Cannot access {path}: {message}")


@_dataclasses.dataclass(frozen=True, slots=True)
class FileEntry:
    """A matched file."""

    absolute_path: str
    base_name: str


@_dataclasses.dataclass(frozen=True, slots=True)
class MapOptions:
    """
    Options for map_directory.

    Attributes:
        path: Root directory to scan. Kept verbatim as DirectoryMap.root.
        type: Extension to match, with or without the leading dot.
    """

    path: str
    type: str

    @classmethod
    def from_mapping(cls, options: _abc.Mapping[str, _typing.Any]) -> MapOptions:
        """Build options from a {"path": ..., "type": ...} mapping."""
        return cls(path=_os.fspath(options["path"]), type=str(options["type"]))

    @classmethod
    def from_settings(
        cls,
        path: str | _os.PathLike[str],
        settings: config_module.Settings | None = None,
    ) -> MapOptions:
        """Build options using the configured default extension."""
        if settings is None:
            settings = config_module.Settings()
        return cls(path=_os.fspath(path), type=settings.mapper.default_type)

    def matches(self, filename: str) -> bool:
        """Check a file name's extension (case-sensitive)."""
        ext = _os.path.splitext(filename)[1]
        return ext in (self.type, "." + self.type)


class DirectoryMap(_abc.Mapping[str, FileEntry]):
    """
    Read-only mapping of root-relative path to FileEntry.

    The scanned root is carried as the ``root`` attribute (the string the
    caller supplied, not resolved) and is never one of the keys.
    """

    __slots__ = ("_entries", "_root")

    def __init__(self, root: str, entries: dict[str, FileEntry]) -> None:
        self._root = root
        self._entries = entries

    @property
    def root(self) -> str:
        """The root path as passed to map_directory."""
        return self._root

    @property
    def entries(self) -> _abc.Mapping[str, FileEntry]:
        """Read-only view of the entries."""
        return _types.MappingProxyType(self._entries)

    def __getitem__(self, key: str) -> FileEntry:
        return self._entries[key]

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DirectoryMap(root={self._root!r}, entries={self._entries!r})"


def _stat_path(path: _pathlib.Path) -> _os.stat_result:
    try:
        return path.stat()
    except OSError as e:
        _logger.warning("Cannot stat %s: %s", path, e)
        raise FilesystemAccessError(path, e.strerror or str(e)) from e


def _list_dir(directory: str | _pathlib.Path) -> list[str]:
    try:
        return sorted(_os.listdir(directory))
    except OSError as e:
        _logger.warning("Cannot list %s: %s", directory, e)
        raise FilesystemAccessError(directory, e.strerror or str(e)) from e


def map_directory(
    options: MapOptions | _abc.Mapping[str, _typing.Any],
) -> DirectoryMap:
    """
    Index files of one extension under a directory tree.

    Directories are visited breadth-first (FIFO), children in sorted name
    order. Every file whose extension matches ``options.type`` is added
    under its root-relative path, joined with the platform separator.

    Args:
        options: MapOptions, or a mapping with "path" and "type" keys.

    Returns:
        DirectoryMap of the matching files.

    Raises:
        FilesystemAccessError: A directory could not be listed or a child
            could not be stat'ed (missing root, permissions, broken
            symlink). The whole call fails; nothing partial is returned.
    """
    if not isinstance(options, MapOptions):
        options = MapOptions.from_mapping(options)

    root = _pathlib.Path(options.path)
    entries: dict[str, FileEntry] = {}
    pending: _collections.deque[_pathlib.PurePath] = _collections.deque([_pathlib.PurePath()])

    while pending:
        rel = pending.popleft()
        directory = root / rel
        _logger.debug("Scanning %s", directory)

        # Root is listed from the caller's string; Path("") would become "."
        for name in _list_dir(directory if rel.parts else options.path):
            child = directory / name
            if _stat.S_ISDIR(_stat_path(child).st_mode):
                pending.append(rel / name)
                continue

            if not options.matches(name):
                continue

            key = str(rel / name)
            base_name = name[: len(name) - len(_os.path.splitext(name)[1])]
            entries[key] = FileEntry(
                absolute_path=_os.path.abspath(child),
                base_name=base_name,
            )
            _logger.debug("Matched %s", key)

    return DirectoryMap(options.path, entries)
