from __future__ import annotations

"""
Directory Tree Walker.

Depth-first traversal that lists each directory, drops hidden entries,
emits one rendered line per visible child and keeps the running counts.
Only failures on the root abort a traversal; unreadable subdirectories are
shown as leaves and the walk moves on to their siblings.
"""

import logging
from typing import Callable, List, Optional, Tuple

from dirtree.core.analysis.tree_renderer import render_line, render_summary
from dirtree.core.analysis.visibility import VisibilityClassifier, get_visibility_classifier
from dirtree.domain.config import TreeOptions
from dirtree.domain.constants import ASCII_GLYPHS, UNICODE_GLYPHS
from dirtree.domain.errors import RootUnreadableError
from dirtree.domain.tree_models import (
    DirectoryEntry,
    EntryKind,
    TraversalState,
    TreeCounts,
    TreeReport,
)
from dirtree.infra.fs import is_cyclic_link, list_directory, real_path, resolve_root

logger = logging.getLogger(__name__)

LineSink = Callable[[str], None]
Lister = Callable[[str], List[DirectoryEntry]]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_directory_tree(
        root_path: Optional[str],
        options: Optional[TreeOptions] = None,
        *,
        classifier: Optional[VisibilityClassifier] = None,
        lister: Lister = list_directory,
        emit: Optional[LineSink] = None,
) -> TreeReport:
    """
    Render the directory tree below root_path.

    Args:
        root_path: Directory to traverse; empty or None means the current one.
        options: Traversal and rendering options.
        classifier: Hidden-entry rules; defaults to the host platform's.
        lister: Directory enumeration capability.
        emit: Optional callback receiving each line as soon as it is rendered.

    Returns:
        TreeReport: Rendered lines, counts and summary line.

    Raises:
        RootNotFoundError: root_path does not exist.
        RootNotDirectoryError: root_path is not a directory.
        RootUnreadableError: root_path cannot be listed.
    """
    root = resolve_root(root_path)
    logger.info(f"Generating directory tree for: {root}")

    lines: List[str] = []

    def sink(line: str) -> None:
        lines.append(line)
        if emit is not None:
            emit(line)

    counts = TreeCounts()
    walker = TreeWalker(options, classifier=classifier, lister=lister, emit=sink)
    try:
        children = walker.visible_children(root)
    except OSError as e:
        raise RootUnreadableError(root, e) from e
    walker.render_children(root, children, TraversalState(), counts)

    logger.debug(f"Traversal finished: {counts.directories} directories, {counts.files} files")
    return TreeReport(root=root, lines=lines, counts=counts, summary=render_summary(counts))

# -----------------------------------------------------------------------------
# WALKER
# -----------------------------------------------------------------------------

class TreeWalker:
    """
    Recursive renderer of one directory graph.

    The walker owns no traversal state: depth and ancestor flags travel in
    the TraversalState argument and counts in the TreeCounts argument. The
    resolved paths of the directories on the current descent chain travel
    in the visited argument so that chains of links cannot loop.
    """

    def __init__(
            self,
            options: Optional[TreeOptions] = None,
            *,
            classifier: Optional[VisibilityClassifier] = None,
            lister: Lister = list_directory,
            emit: Optional[LineSink] = None,
    ) -> None:
        self.options = options or TreeOptions()
        self.classifier = classifier or get_visibility_classifier()
        self.glyphs = ASCII_GLYPHS if self.options.ascii_glyphs else UNICODE_GLYPHS
        self._list = lister
        self._emit: LineSink = emit or (lambda line: None)

    def walk(self, path: str, state: TraversalState, counts: TreeCounts) -> None:
        """
        Render every visible child of path, descending into directories.

        Raises:
            OSError: path itself cannot be listed. Failures below path are
                     contained and never propagate.
        """
        self.render_children(path, self.visible_children(path), state, counts)

    def render_children(
            self,
            path: str,
            children: List[DirectoryEntry],
            state: TraversalState,
            counts: TreeCounts,
            visited: Tuple[str, ...] = (),
    ) -> None:
        """Emit and count the already-listed children of path, recursing into directories."""
        total = len(children)
        chain = visited + (real_path(path),)

        for index, entry in enumerate(children):
            is_last = index == total - 1
            self._emit(render_line(entry.name, entry.kind, state, is_last, self.glyphs))
            counts.record(entry.kind)

            if self._should_descend(entry, path, state, chain):
                self._descend(entry, state.descend(is_last), counts, chain)

    def visible_children(self, path: str) -> List[DirectoryEntry]:
        """List path and apply hidden-entry and display filters, keeping order."""
        children = self._list(path)
        if not self.options.show_hidden:
            children = [c for c in children if not self.classifier.is_hidden(c)]
        if self.options.dirs_only:
            children = [c for c in children if c.kind is EntryKind.DIRECTORY]
        return children

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _should_descend(
            self,
            entry: DirectoryEntry,
            parent: str,
            state: TraversalState,
            chain: Tuple[str, ...],
    ) -> bool:
        if not entry.is_directory:
            return False

        max_depth = self.options.max_depth
        if max_depth is not None and state.depth + 1 >= max_depth:
            return False

        if is_cyclic_link(entry, parent, chain):
            logger.info(f"Not following cyclic link: {entry.path}")
            return False

        return True

    def _descend(
            self,
            entry: DirectoryEntry,
            child_state: TraversalState,
            counts: TreeCounts,
            chain: Tuple[str, ...],
    ) -> None:
        try:
            children = self.visible_children(entry.path)
        except OSError as e:
            # Already rendered and counted; keep it as a leaf
            logger.warning(f"Cannot read directory '{entry.path}': {e.strerror or e}")
            return
        self.render_children(entry.path, children, child_state, counts, chain)
