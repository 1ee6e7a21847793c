from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema of the standalone condenser and translates
the parsed namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from lssuppress import __version__
from lssuppress.domain import constants as const

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the lssuppress CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="lssuppress",
        description=(
            "Condense `ls -R` output by collapsing oversized top-level "
            "directories into one annotated line."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="File holding the listing output (default: stdin).",
    )
    p.add_argument(
        "-c", "--command",
        dest="command",
        default=None,
        help="Command that produced the output; when given, non-recursive "
             "listings are passed through untouched.",
    )

    # --- Thresholds ---
    p.add_argument(
        "--max-blocks",
        dest="max_blocks",
        default=None,
        help=f"Max directory blocks per top-level directory "
             f"(default: ${const.ENV_MAX_BLOCKS} or {const.DEFAULT_MAX_BLOCKS}).",
    )
    p.add_argument(
        "--max-entries",
        dest="max_entries",
        default=None,
        help=f"Max entries per top-level directory "
             f"(default: ${const.ENV_MAX_ENTRIES} or {const.DEFAULT_MAX_ENTRIES}).",
    )

    # --- Reporting ---
    p.add_argument(
        "--stats",
        action="store_true",
        help="Print per-top-level-directory statistics to stderr.",
    )
    p.add_argument(
        "--tokens",
        action="store_true",
        help="Estimate tokens before and after condensing.",
    )
    p.add_argument(
        "--heuristic-tokens",
        action="store_true",
        help="With --tokens, estimate from character count instead of loading "
             "tiktoken encodings (no download).",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full result as JSON instead of the listing.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Threshold strings are passed through raw; the validator coerces them.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.max_blocks is not None:
        overrides["max_blocks"] = args.max_blocks
    if args.max_entries is not None:
        overrides["max_entries"] = args.max_entries
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
