from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Wraps the operating system's directory-listing call and root path checks so
the traversal core only ever sees DirectoryEntry objects in a deterministic
order. Acts as the single seam where 'os' enumeration semantics (symlinks,
Windows attribute words, race conditions) are translated.
"""

import os
from typing import List, Optional, Tuple

from dirtree.domain.errors import RootNotDirectoryError, RootNotFoundError
from dirtree.domain.tree_models import DirectoryEntry, EntryKind

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_root(path: Optional[str]) -> str:
    """
    Resolve the traversal root and verify it is an existing directory.

    Args:
        path: Raw root path; empty or None means the current directory.

    Returns:
        str: Absolute root path.

    Raises:
        RootNotFoundError: The path does not exist.
        RootNotDirectoryError: The path exists but is not a directory.
    """
    root = normalize_path(path, os.getcwd())
    if not os.path.exists(root):
        raise RootNotFoundError(root)
    if not os.path.isdir(root):
        raise RootNotDirectoryError(root)
    return root

# -----------------------------------------------------------------------------
# ENUMERATION API
# -----------------------------------------------------------------------------

def list_directory(path: str) -> List[DirectoryEntry]:
    """
    Enumerate the immediate children of a directory in name order.

    The listing handle is consumed and closed before returning, including
    when enumeration fails half way.

    Args:
        path: Directory to list.

    Returns:
        List[DirectoryEntry]: Children sorted lexicographically by name.

    Raises:
        OSError: The directory cannot be opened or read.
    """
    entries: List[DirectoryEntry] = []
    with os.scandir(path) as it:
        for dir_entry in it:
            entries.append(_to_entry(dir_entry))

    entries.sort(key=lambda e: e.name)
    return entries


def real_path(path: str) -> str:
    """Resolve every symbolic link in path."""
    return os.path.realpath(path)


def is_cyclic_link(entry: DirectoryEntry, parent_path: str, visited: Tuple[str, ...] = ()) -> bool:
    """
    Check whether a symlinked directory points back into its own ancestry.

    Args:
        entry: Child entry found while listing parent_path.
        parent_path: Directory being listed.
        visited: Resolved paths of the directories the walk went through to
                 reach parent_path, which may differ from its physical
                 ancestors once a link has been followed.

    Returns:
        bool: True if descending into the link would revisit parent_path,
              one of its physical ancestors or a directory in visited.
    """
    if not entry.is_symlink:
        return False
    target = real_path(entry.path)
    if target in visited:
        return True
    here = real_path(parent_path)
    try:
        return os.path.commonpath([here, target]) == target
    except ValueError:
        # Different drives on Windows
        return False

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _to_entry(dir_entry: os.DirEntry) -> DirectoryEntry:
    """Translate an os.DirEntry, tolerating per-entry metadata failures."""
    try:
        is_symlink = dir_entry.is_symlink()
    except OSError:
        is_symlink = False

    # is_dir() follows links; broken or looping links end up as files
    try:
        is_dir = dir_entry.is_dir()
    except OSError:
        is_dir = False

    return DirectoryEntry(
        name=dir_entry.name,
        path=dir_entry.path,
        kind=EntryKind.DIRECTORY if is_dir else EntryKind.FILE,
        is_symlink=is_symlink,
        file_attributes=_cached_attributes(dir_entry),
    )


def _cached_attributes(dir_entry: os.DirEntry) -> Optional[int]:
    """
    Return the Windows attribute word already fetched by the listing.

    On Windows, DirEntry.stat(follow_symlinks=False) is served from the
    directory listing without a system call. Elsewhere the attribute does
    not exist and None is returned.
    """
    if os.name != "nt":
        return None
    try:
        return int(dir_entry.stat(follow_symlinks=False).st_file_attributes)
    except (OSError, AttributeError):
        return None
