from __future__ import annotations

"""
Directory Tree Data Models.

Provides the entry, traversal-state and counter structures shared by the
walker and the renderer while a directory graph is being drawn.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# FILESYSTEM NODES
# -----------------------------------------------------------------------------

class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class DirectoryEntry:
    """
    One child yielded by a directory listing.

    Attributes:
        name: Base name of the entry.
        path: Full path to the entry.
        kind: File or directory (symlinks carry their target's kind).
        is_symlink: Whether the entry itself is a symbolic link.
        file_attributes: Windows attribute word when the listing already
                         fetched it, None otherwise.
    """
    name: str
    path: str
    kind: EntryKind
    is_symlink: bool = False
    file_attributes: Optional[int] = None

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

# -----------------------------------------------------------------------------
# TRAVERSAL STATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalState:
    """
    Position of the walker in the directory graph.

    ancestors_last[i] is True when the ancestor at level i was the last
    sibling of its parent. The state is immutable: descending returns a new
    object and leaves the caller's untouched.
    """
    ancestors_last: Tuple[bool, ...] = ()

    @property
    def depth(self) -> int:
        return len(self.ancestors_last)

    def descend(self, is_last: bool) -> TraversalState:
        return TraversalState(self.ancestors_last + (is_last,))


@dataclass
class TreeCounts:
    files: int = 0
    directories: int = 0

    def record(self, kind: EntryKind) -> None:
        if kind is EntryKind.DIRECTORY:
            self.directories += 1
        else:
            self.files += 1

    @property
    def total(self) -> int:
        return self.files + self.directories

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GlyphSet:
    """
    Connector strings used to draw the tree.

    Attributes:
        branch: Elbow for an entry with more siblings below it.
        corner: Elbow for the last sibling.
        vertical: Ancestor column whose ancestor still has siblings below.
        blank: Ancestor column whose ancestor was the last sibling.
    """
    branch: str
    corner: str
    vertical: str
    blank: str


@dataclass(frozen=True)
class TreeReport:
    """
    Result of one complete traversal.

    Attributes:
        root: Absolute path of the traversed root directory.
        lines: Rendered entry lines in traversal order.
        counts: Visible files and directories rendered.
        summary: Final summary line.
    """
    root: str
    lines: List[str] = field(default_factory=list)
    counts: TreeCounts = field(default_factory=TreeCounts)
    summary: str = ""
