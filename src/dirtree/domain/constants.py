from __future__ import annotations

"""
Domain Constants.

Centralizes the glyph sets, display markers and summary format used when
rendering directory trees.
"""

from dirtree.domain.tree_models import GlyphSet

HIDDEN_PREFIX = "."
DIRECTORY_MARKER = "/"

SUMMARY_TEMPLATE = "{directories} directories, {files} files"

# -----------------------------------------------------------------------------
# CONNECTOR GLYPHS
# -----------------------------------------------------------------------------
UNICODE_GLYPHS = GlyphSet(
    branch="├── ",
    corner="└── ",
    vertical="│   ",
    blank="    ",
)

ASCII_GLYPHS = GlyphSet(
    branch="|-- ",
    corner="`-- ",
    vertical="|   ",
    blank="    ",
)
