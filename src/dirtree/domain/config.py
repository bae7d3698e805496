from __future__ import annotations

"""
Configuration Domain.

Defines the default runtime configuration (a plain dictionary that the CLI
layer overrides and the validator normalizes) and the immutable options
object consumed by the tree walker. Nothing here is persisted.
"""

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "root_path": os.getcwd(),

        # Visibility
        "show_hidden": False,
        "dirs_only": False,

        # Traversal (0 = unlimited)
        "max_depth": 0,

        # Rendering
        "ascii_glyphs": False,
    }


@dataclass(frozen=True)
class TreeOptions:
    """
    Options recognized by the traversal core.

    Attributes:
        show_hidden: Render and count hidden entries like any other.
        dirs_only: Render directories only; files are neither shown nor counted.
        max_depth: Number of levels to display, None for unlimited.
        ascii_glyphs: Draw connectors with ASCII instead of box-drawing characters.
    """
    show_hidden: bool = False
    dirs_only: bool = False
    max_depth: Optional[int] = None
    ascii_glyphs: bool = False

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> TreeOptions:
        """Build options from a validated configuration dictionary."""
        depth = int(config.get("max_depth") or 0)
        return cls(
            show_hidden=bool(config.get("show_hidden", False)),
            dirs_only=bool(config.get("dirs_only", False)),
            max_depth=depth if depth > 0 else None,
            ascii_glyphs=bool(config.get("ascii_glyphs", False)),
        )
