from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, merging of defaults with
command-line overrides, validation, traversal and summary output. The tree
itself streams to stdout while it is walked; diagnostics go to stderr.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional

from dirtree.core.analysis.tree_walker import generate_directory_tree
from dirtree.core.validator import validate_config
from dirtree.domain.config import TreeOptions, get_default_config
from dirtree.domain.errors import TreeError
from dirtree.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from dirtree.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_BAD_ROOT = 2
EXIT_INTERRUPTED = 130
EXIT_BROKEN_PIPE = 141

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    _configure_streams()

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console stderr, optional rotating file)
    logging_conf = LoggingConfig(
        level=cli_args.resolve_log_level(args),
        console=True,
        log_file=args.log_file,
    )
    configure_logging(logging_conf, force=True)

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: Any) -> int:
    # 3. Merge command-line overrides into defaults and validate
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Traversal phase (lines stream to stdout as they are rendered)
    options = TreeOptions.from_config(clean_conf)
    try:
        report = generate_directory_tree(clean_conf["root_path"], options, emit=print)
        # 5. Summary
        print(report.summary)
    except TreeError as e:
        logger.debug(f"Traversal aborted: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_BAD_ROOT
    except BrokenPipeError:
        logger.debug("Output closed by the reader, stopping traversal")
        _detach_stdout()
        return EXIT_BROKEN_PIPE
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED

    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge known, non-None override values into the base configuration.
    """
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# STREAM HANDLING
# -----------------------------------------------------------------------------

def _configure_streams() -> None:
    """
    Make stdout and stderr tolerate names the terminal encoding cannot express.

    Names that are not valid in the filesystem encoding reach Python as lone
    surrogates; they are written as backslash escapes instead of aborting
    the run halfway through the tree.
    """
    for stream in (sys.stdout, sys.stderr):
        if not hasattr(stream, "reconfigure"):
            continue
        if sys.platform == "win32":
            stream.reconfigure(encoding="utf-8", errors="backslashreplace")
        else:
            stream.reconfigure(errors="backslashreplace")


def _detach_stdout() -> None:
    """Point stdout at the null device so the exit-time flush cannot fail again."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        # stdout is not backed by a file descriptor
        return

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
