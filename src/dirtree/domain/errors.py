from __future__ import annotations

"""
Traversal Error Taxonomy.

Only failures on the root path are fatal. Per-entry problems (unreadable
directories, broken links, attribute lookups) are contained by the walker and
never surface as exceptions.
"""


class TreeError(Exception):
    """Base class for conditions that abort a whole traversal."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class RootNotFoundError(TreeError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"Root path does not exist: {path}")


class RootNotDirectoryError(TreeError):
    def __init__(self, path: str) -> None:
        super().__init__(path, f"Root path is not a directory: {path}")


class RootUnreadableError(TreeError):
    def __init__(self, path: str, reason: OSError) -> None:
        self.reason = reason
        super().__init__(path, f"Root directory cannot be read: {path} ({reason.strerror or reason})")
