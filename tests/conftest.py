from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory-tree fixtures and a fake lister used across unit tests.
"""

import os
import sys
from pathlib import Path
from typing import Dict, List, Set

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirtree.domain.tree_models import DirectoryEntry, EntryKind  # noqa: E402
from dirtree.infra.fs import list_directory  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree used throughout the suite.

    Structure:
    /root
      a.txt
      .secret
      /sub
        b.txt
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("a", encoding="utf-8")
    (root / ".secret").write_text("s", encoding="utf-8")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("b", encoding="utf-8")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """
    Create a tree deep enough to exercise ancestor connector columns.

    Structure:
    /nested
      /alpha
        /beta
          /gamma
            deep.txt
          beta.txt
      /omega
        /x
          /y
            z.txt
      zz.txt
    """
    root = tmp_path / "nested"
    gamma = root / "alpha" / "beta" / "gamma"
    gamma.mkdir(parents=True)
    (gamma / "deep.txt").write_text("", encoding="utf-8")
    (root / "alpha" / "beta" / "beta.txt").write_text("", encoding="utf-8")
    y = root / "omega" / "x" / "y"
    y.mkdir(parents=True)
    (y / "z.txt").write_text("", encoding="utf-8")
    (root / "zz.txt").write_text("", encoding="utf-8")
    return root


class FailingLister:
    """Directory lister that raises PermissionError for selected paths."""

    def __init__(self, locked: Set[str]) -> None:
        self.locked = {os.path.abspath(p) for p in locked}
        self.calls: List[str] = []

    def __call__(self, path: str) -> List[DirectoryEntry]:
        self.calls.append(path)
        if os.path.abspath(path) in self.locked:
            raise PermissionError(13, "Permission denied", path)
        return list_directory(path)


@pytest.fixture
def failing_lister():
    return FailingLister


def make_entry(name: str, kind: EntryKind = EntryKind.FILE, **kwargs) -> DirectoryEntry:
    """Build a DirectoryEntry without touching the filesystem."""
    return DirectoryEntry(name=name, path=os.path.join("virtual", name), kind=kind, **kwargs)


@pytest.fixture
def entry_factory():
    return make_entry


@pytest.fixture
def virtual_fs() -> Dict[str, List[DirectoryEntry]]:
    """
    In-memory listing table for walker tests that emulate another platform.

    Keys are directory paths; values are their children.
    """
    return {}
