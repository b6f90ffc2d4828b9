"""
Value kinds for clone and extend.

Values are sorted into a closed set of kinds so clone and extend can
dispatch on an explicit tag:

- MAPPING: any collections.abc.Mapping
- SEQUENCE: any collections.abc.Sequence except text and bytes
- FUNCTION: any other callable
- PRIMITIVE: everything else (None, numbers, strings, plain objects)
"""

from __future__ import annotations

import collections.abc as _abc
import enum as _enum
import typing as _typing

# str/bytes are Sequences but behave as scalars here
_SCALAR_SEQUENCES = (str, bytes, bytearray)

# Value is any JSON-like structure plus callables; kept loose at runtime
Value: _typing.TypeAlias = _typing.Any


class ValueKind(_enum.Enum):
    """Kind tag for a Value."""

    PRIMITIVE = "primitive"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    FUNCTION = "function"


def kind_of(value: Value) -> ValueKind:
    """
    Classify a value.

    Checks run mapping first, then sequence, then callable, so a
    callable mapping is still a MAPPING.

    Example:
        >>> kind_of({"a": 1})
        <ValueKind.MAPPING: 'mapping'>
        >>> kind_of("abc")
        <ValueKind.PRIMITIVE: 'primitive'>
    """
    if isinstance(value, _abc.Mapping):
        return ValueKind.MAPPING
    if isinstance(value, _abc.Sequence) and not isinstance(value, _SCALAR_SEQUENCES):
        return ValueKind.SEQUENCE
    if callable(value):
        return ValueKind.FUNCTION
    return ValueKind.PRIMITIVE


def is_container(value: Value) -> bool:
    """True for mappings and sequences."""
    return kind_of(value) in (ValueKind.MAPPING, ValueKind.SEQUENCE)


def is_complex(value: Value) -> bool:
    """True only for mappings; these are the values extend recurses into."""
    return kind_of(value) is ValueKind.MAPPING
