"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create root/ with a 3 byte file x.txt and an empty subdirectory sub/."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "x.txt").write_text("abc")
    (root / "sub").mkdir()
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Create a three level tree with files at every depth.

    Layout:
        top/a.txt
        top/mid/b.txt
        top/mid/low/c.txt
        top/empty/
    """
    top = tmp_path / "top"
    (top / "mid" / "low").mkdir(parents=True)
    (top / "empty").mkdir()
    (top / "a.txt").write_text("a")
    (top / "mid" / "b.txt").write_text("bb")
    (top / "mid" / "low" / "c.txt").write_text("ccc")
    return top


@pytest.fixture
def config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home))
    return home
