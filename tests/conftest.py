"""
Shared pytest fixtures for treekit tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import pathlib as _pathlib

import pytest as _pytest

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "TREEKIT_CONFIG_DIR",
    "TREEKIT_ENV_FILE",
    "TREEKIT_LOGGING__LEVEL",
    "TREEKIT_LOGGING__FORMAT",
    "TREEKIT_MAPPER__DEFAULT_TYPE",
]


@_pytest.fixture(autouse=True)
def isolated_env(
    monkeypatch: _pytest.MonkeyPatch,
    tmp_path_factory: _pytest.TempPathFactory,
) -> None:
    """Clear TREEKIT_* variables and point user config at an empty dir."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("TREEKIT_CONFIG_DIR", str(tmp_path_factory.mktemp("user-config")))


@_pytest.fixture
def sample_tree(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """
    Directory tree used by mapper tests.

    root/
        a.txt
        b.log
        sub/
            c.txt
            deeper/
                d.txt
                e.TXT
        empty/
    """
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.log").write_text("b")
    (root / "sub" / "c.txt").write_text("c")
    (root / "sub" / "deeper" / "d.txt").write_text("d")
    (root / "sub" / "deeper" / "e.TXT").write_text("e")
    return root
