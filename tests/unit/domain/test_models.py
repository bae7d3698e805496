from __future__ import annotations

"""
Unit tests for the domain models and options.
"""

import pytest

from dirtree.domain.config import TreeOptions, get_default_config
from dirtree.domain.errors import RootNotFoundError, RootUnreadableError, TreeError
from dirtree.domain.tree_models import EntryKind, TraversalState, TreeCounts


def test_traversal_state_descend_is_non_destructive() -> None:
    root = TraversalState()
    child = root.descend(False)
    grandchild = child.descend(True)

    assert root.depth == 0
    assert root.ancestors_last == ()
    assert child.ancestors_last == (False,)
    assert grandchild.ancestors_last == (False, True)
    assert grandchild.depth == 2


def test_traversal_state_is_frozen() -> None:
    state = TraversalState()
    with pytest.raises(AttributeError):
        state.ancestors_last = (True,)  # type: ignore[misc]


def test_counts_record_each_kind_once() -> None:
    counts = TreeCounts()
    counts.record(EntryKind.FILE)
    counts.record(EntryKind.FILE)
    counts.record(EntryKind.DIRECTORY)

    assert counts.files == 2
    assert counts.directories == 1
    assert counts.total == 3


def test_default_config_keys() -> None:
    cfg = get_default_config()

    assert set(cfg) == {"root_path", "show_hidden", "dirs_only", "max_depth", "ascii_glyphs"}
    assert cfg["show_hidden"] is False
    assert cfg["max_depth"] == 0


def test_options_from_config_maps_unlimited_depth() -> None:
    cfg = get_default_config()

    assert TreeOptions.from_config(cfg) == TreeOptions()
    assert TreeOptions.from_config({**cfg, "max_depth": 2}).max_depth == 2


def test_options_from_config_reads_flags() -> None:
    options = TreeOptions.from_config({"show_hidden": True, "dirs_only": True, "ascii_glyphs": True})

    assert options.show_hidden is True
    assert options.dirs_only is True
    assert options.ascii_glyphs is True
    assert options.max_depth is None


def test_error_messages_carry_path() -> None:
    err = RootNotFoundError("/does/not/exist")

    assert isinstance(err, TreeError)
    assert err.path == "/does/not/exist"
    assert "/does/not/exist" in str(err)


def test_unreadable_error_keeps_reason() -> None:
    reason = PermissionError(13, "Permission denied")
    err = RootUnreadableError("/locked", reason)

    assert err.reason is reason
    assert "Permission denied" in str(err)
