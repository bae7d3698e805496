from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides for the traversal core.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the dirtree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="dirtree",
        description="Print the contents of a directory as a tree, followed by "
                    "a count of the directories and files shown.",
    )

    # --- Path Management ---
    p.add_argument(
        "root_path",
        nargs="?",
        default=None,
        help="Directory to display (default: current directory).",
    )

    # --- Visibility ---
    p.add_argument(
        "-a", "--all",
        dest="show_hidden",
        action="store_true",
        help="Include hidden files and directories.",
    )
    p.add_argument(
        "-d", "--dirs-only",
        dest="dirs_only",
        action="store_true",
        help="List directories only.",
    )

    # --- Traversal ---
    p.add_argument(
        "-L", "--level",
        dest="max_depth",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Descend at most N levels (0 = unlimited).",
    )

    # --- Rendering ---
    p.add_argument(
        "--ascii",
        dest="ascii_glyphs",
        action="store_true",
        help="Draw connectors with plain ASCII characters.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Elevate logging verbosity to INFO.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Flags that were not given map to None (or are omitted) so that the
    defaults survive the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["root_path"] = args.root_path
    overrides["max_depth"] = args.max_depth

    if args.show_hidden:
        overrides["show_hidden"] = True
    if args.dirs_only:
        overrides["dirs_only"] = True
    if args.ascii_glyphs:
        overrides["ascii_glyphs"] = True

    return overrides


def resolve_log_level(args: argparse.Namespace) -> str:
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    return "WARNING"

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: '{value}'")
    if n < 0:
        raise argparse.ArgumentTypeError(f"level must be >= 0, got {n}")
    return n
