import logging
import os
import sys
from pathlib import Path

import pytest

from fstree.utils.error_handling import error_handler

# Add the project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep the user's ~/.fstree config, root logging and error history out of tests."""

    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr("pathlib.Path.home", lambda: home)

    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    error_handler.clear()
    try:
        yield home
    finally:
        for handler in root.handlers:
            if handler not in saved_handlers:
                handler.close()
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        error_handler.clear()


@pytest.fixture
def sample_tree(tmp_path) -> Path:
    """
    Build a small directory tree:

        root/
        ├── .git/config
        ├── .hidden
        ├── a.txt
        └── b/
            ├── c.txt
            └── d/
                └── e.txt
    """
    root = tmp_path / "root"
    (root / ".git").mkdir(parents=True)
    (root / ".git" / "config").write_text("[core]\n")
    (root / ".hidden").write_text("secret")
    (root / "a.txt").write_text("a")
    (root / "b" / "d").mkdir(parents=True)
    (root / "b" / "c.txt").write_text("c")
    (root / "b" / "d" / "e.txt").write_text("e")
    return root
