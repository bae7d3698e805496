from __future__ import annotations

"""
Visibility Classifier.

Decides whether a directory entry is hidden. POSIX systems only know the
dot-prefix convention; Windows additionally carries a hidden attribute bit.
The implementation is selected once at runtime so the walker never branches
on the platform itself.

Attribute lookups that fail are treated as "not hidden" (fail-open): the tree
should rather show one entry too many than silently drop it.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod
from typing import Callable, Optional

from dirtree.domain.constants import HIDDEN_PREFIX
from dirtree.domain.tree_models import DirectoryEntry

logger = logging.getLogger(__name__)

StatFunc = Callable[[str], os.stat_result]

# -----------------------------------------------------------------------------
# CLASSIFIER INTERFACE
# -----------------------------------------------------------------------------

class VisibilityClassifier(ABC):
    """Platform capability answering 'is this entry hidden?'."""

    @abstractmethod
    def is_hidden(self, entry: DirectoryEntry) -> bool:
        """Return True if the entry must be excluded from display and counts."""


def has_hidden_name(name: str) -> bool:
    """Check the dot-prefix rule on the base name only."""
    return os.path.basename(name).startswith(HIDDEN_PREFIX)

# -----------------------------------------------------------------------------
# PLATFORM IMPLEMENTATIONS
# -----------------------------------------------------------------------------

class PosixVisibilityClassifier(VisibilityClassifier):

    def is_hidden(self, entry: DirectoryEntry) -> bool:
        return has_hidden_name(entry.name)


class WindowsVisibilityClassifier(VisibilityClassifier):
    """
    Dot-prefix names and entries with FILE_ATTRIBUTE_HIDDEN are hidden.

    Uses the attribute word cached by the listing when present and falls
    back to one lstat() call otherwise.
    """

    def __init__(self, stat_func: Optional[StatFunc] = None) -> None:
        self._stat = stat_func or os.lstat

    def is_hidden(self, entry: DirectoryEntry) -> bool:
        if has_hidden_name(entry.name):
            return True

        attributes = entry.file_attributes
        if attributes is None:
            attributes = self._lookup_attributes(entry.path)
        return bool(attributes & stat.FILE_ATTRIBUTE_HIDDEN)

    def _lookup_attributes(self, path: str) -> int:
        try:
            st = self._stat(path)
        except OSError as e:
            logger.debug(f"Attribute lookup failed for '{path}', treating as visible: {e}")
            return 0
        return int(getattr(st, "st_file_attributes", 0))

# -----------------------------------------------------------------------------
# FACTORY
# -----------------------------------------------------------------------------

def get_visibility_classifier(platform_name: Optional[str] = None) -> VisibilityClassifier:
    """
    Select the classifier for the host (or an emulated) platform.

    Args:
        platform_name: Value in the style of os.name; defaults to the host's.

    Returns:
        VisibilityClassifier: Windows rules for "nt", POSIX rules otherwise.
    """
    name = os.name if platform_name is None else platform_name
    if name == "nt":
        return WindowsVisibilityClassifier()
    return PosixVisibilityClassifier()
