from __future__ import annotations

"""
Tree Renderer.

Turns one entry plus its position in the traversal into a display line.
All functions are pure so connector logic can be tested without touching
the filesystem.
"""

from dirtree.domain.constants import DIRECTORY_MARKER, SUMMARY_TEMPLATE, UNICODE_GLYPHS
from dirtree.domain.tree_models import EntryKind, GlyphSet, TraversalState, TreeCounts

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_prefix(state: TraversalState, glyphs: GlyphSet = UNICODE_GLYPHS) -> str:
    """
    Build the indentation columns for every ancestor level.

    A column carries a vertical bar while its ancestor still has siblings
    below it and is blank once that ancestor was the last one.
    """
    return "".join(
        glyphs.blank if was_last else glyphs.vertical
        for was_last in state.ancestors_last
    )


def render_line(
        name: str,
        kind: EntryKind,
        state: TraversalState,
        is_last: bool,
        glyphs: GlyphSet = UNICODE_GLYPHS,
) -> str:
    """
    Render the display line for a single entry.

    Args:
        name: Entry base name, printed verbatim.
        kind: File or directory; directories get a trailing marker.
        state: Depth and last-sibling flags of the entry's ancestors.
        is_last: Whether the entry is the final visible sibling.
        glyphs: Connector set to draw with.

    Returns:
        str: Prefix, elbow connector and label.
    """
    connector = glyphs.corner if is_last else glyphs.branch
    label = f"{name}{DIRECTORY_MARKER}" if kind is EntryKind.DIRECTORY else name
    return f"{render_prefix(state, glyphs)}{connector}{label}"


def render_summary(counts: TreeCounts) -> str:
    return SUMMARY_TEMPLATE.format(directories=counts.directories, files=counts.files)
