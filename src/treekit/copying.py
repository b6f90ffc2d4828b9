"""
Deep copy of nested values.

Only mappings and sequences are copied. Everything else (including
functions and arbitrary objects) is shared with the input.
"""

from __future__ import annotations

import treekit.kinds as kinds


def clone(value: kinds.Value) -> kinds.Value:
    """
    Return a deep copy of a value.

    - Mappings become a new dict with every value cloned, in key order.
    - Tuples become a new tuple, other sequences a new list, each
      element cloned.
    - Anything else is returned unchanged.

    There is no cycle detection: a self-referential value raises
    RecursionError.

    Args:
        value: The value to copy. Never mutated.

    Returns:
        The copy.

    Example:
        >>> data = {"a": [1, {"b": 2}]}
        >>> copy = clone(data)
        >>> copy["a"][1]["b"] = 99
        >>> data["a"][1]["b"]
        2
    """
    kind = kinds.kind_of(value)
    if kind is kinds.ValueKind.SEQUENCE:
        items = [clone(item) for item in value]
        return tuple(items) if isinstance(value, tuple) else items
    if kind is kinds.ValueKind.MAPPING:
        return {key: clone(item) for key, item in value.items()}
    return value
