"""Path string helpers."""

from __future__ import annotations

import os as _os


def ensure_trailing_separator(path: str) -> str:
    """
    Append the platform directory separator unless already present.

    Example:
        >>> ensure_trailing_separator("/srv/data")  # on POSIX
        '/srv/data/'
    """
    if not path.endswith(_os.sep):
        path += _os.sep
    return path
