from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Shared fixtures: a script directory factory and an in-memory filesystem.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from scripthost.domain.config import HostConfig  # noqa: E402
from scripthost.domain.errors import PathNotFoundError, ReadFailureError  # noqa: E402
from scripthost.infra.fs import EntryStatus  # noqa: E402


# -----------------------------------------------------------------------------
# In-memory backend
# -----------------------------------------------------------------------------
class MemoryFileSystem:
    """
    Directory reader over a dict of paths.

    Directories map to the list of their entry names (in the order they
    should be returned); files map to None. Paths listed in ``unreadable``
    raise ReadFailureError when listed.
    """

    def __init__(self, tree: Dict[str, Optional[List[str]]], unreadable: tuple = ()) -> None:
        self.tree = tree
        self.unreadable = set(unreadable)
        self.listed: List[str] = []

    def status_of(self, path: str) -> EntryStatus:
        if path not in self.tree:
            raise PathNotFoundError(f"Cannot inspect '{path}'", path=path)
        return EntryStatus(is_directory=self.tree[path] is not None)

    def list_entries(self, directory: str) -> List[str]:
        self.listed.append(directory)
        if directory in self.unreadable:
            raise ReadFailureError(f"Cannot list '{directory}'", path=directory)
        return list(self.tree[directory] or [])


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def memory_fs_factory() -> Callable[..., MemoryFileSystem]:
    """Return the MemoryFileSystem class for tests that build their own trees."""
    return MemoryFileSystem


@pytest.fixture
def write_scripts(tmp_path: Path) -> Callable[[Dict[str, str]], Path]:
    """
    Return a helper that writes ``{relative_path: source}`` under a fresh
    script directory and returns that directory.
    """
    base = tmp_path / "app"
    base.mkdir()

    def _write(files: Dict[str, str]) -> Path:
        for rel, source in files.items():
            target = base / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source, encoding="utf-8")
        return base

    return _write


@pytest.fixture
def host_config(tmp_path: Path) -> Callable[..., HostConfig]:
    """Return a factory building a HostConfig rooted at the script directory."""

    def _make(**overrides) -> HostConfig:
        data = {"pwd": str(tmp_path / "app")}
        data.update(overrides)
        return HostConfig.from_dict(data)

    return _make
