"""
Recursive merge of one value into another ("extend").

Source fields win. Nested mappings present on both sides are merged
recursively; sequences and functions from the source are assigned by
reference, never merged or cloned.

Example:
    >>> import treekit.merge as merge
    >>> defaults = {"db": {"host": "localhost", "port": 5432}, "tags": ["a"]}
    >>> merge.extend(defaults, {"db": {"port": 6543}, "tags": ["b"]})
    {'db': {'host': 'localhost', 'port': 6543}, 'tags': ['b']}
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import treekit.copying as copying
import treekit.kinds as kinds

_logger = _logging.getLogger(__name__)


def _writable(target: kinds.Value) -> kinds.Value:
    """Copy read-only containers (tuples, mapping proxies) into list/dict."""
    if isinstance(target, (_abc.MutableMapping, _abc.MutableSequence)):
        return target
    _logger.debug("Copying read-only %s target before merge", type(target).__name__)
    if isinstance(target, _abc.Mapping):
        return dict(target)
    return list(target)


def _source_items(source: kinds.Value) -> _typing.Iterable[tuple[_typing.Any, kinds.Value]]:
    """Yield (key, value) pairs: mapping keys, or indices for a sequence."""
    if isinstance(source, _abc.Mapping):
        return list(source.items())
    return list(enumerate(source))


def _owns(target: kinds.Value, key: _typing.Any) -> bool:
    """Check whether target directly holds key."""
    if isinstance(target, _abc.Mapping):
        return key in target
    return isinstance(key, int) and 0 <= key < len(target)


def _assign(target: kinds.Value, key: _typing.Any, value: kinds.Value) -> None:
    """Set target[key], appending when key is one past the end of a list."""
    if isinstance(target, _abc.MutableSequence) and key == len(target):
        target.append(value)
    else:
        target[key] = value


def extend(
    target: kinds.Value,
    source: kinds.Value,
    in_place: bool = False,
) -> kinds.Value:
    """
    Merge source into target and return the result.

    Rules, in order:

    1. A None target is treated as an empty dict.
    2. Non-container target: the result is source (cloned unless in_place).
    3. Non-container source: the result is source, whatever in_place says.
    4. Otherwise target is cloned (unless in_place) and every key of
       source is written into it. A key target does not own, or whose
       source value is not a mapping, is assigned by reference; a mapping
       value for an owned key is merged recursively.

    A list target with a mapping source cannot hold the source's keys, so
    that case follows rule 2.

    Args:
        target: Value to merge into. Mutated only when in_place is True.
        source: Value to merge from. Never mutated.
        in_place: Write into target directly instead of into a clone.

    Returns:
        The merged value.

    Note:
        There is no cycle detection. Cyclic inputs raise RecursionError.
    """
    if target is None:
        _logger.debug("Treating None target as an empty mapping")
        target = {}

    if not kinds.is_container(target):
        return source if in_place else copying.clone(source)

    if not kinds.is_container(source):
        return source

    if kinds.kind_of(target) is kinds.ValueKind.SEQUENCE and (
        kinds.kind_of(source) is kinds.ValueKind.MAPPING
    ):
        _logger.debug("Mapping source replaces sequence target")
        return source if in_place else copying.clone(source)

    if not in_place:
        target = copying.clone(target)
    target = _writable(target)

    for key, value in _source_items(source):
        if not _owns(target, key) or not kinds.is_complex(value):
            _assign(target, key, value)
        else:
            target[key] = extend(target[key], value, in_place)

    return target
