"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from commithub.core import Repository


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Create a workspace directory with a few sample files."""
    root = tmp_path / "workspace"
    root.mkdir()

    (root / "a.txt").write_text("X\n")
    (root / "notes.md").write_text("# Notes\n\n- first item\n")
    (root / "src").mkdir()
    (root / "src" / "app.py").write_text("print('hello')\n")

    return root


@pytest.fixture
def repo(workspace: Path) -> Repository:
    """Create an initialized repository inside the sample workspace."""
    return Repository.init(workspace)
