from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Runs the condenser outside a host: reads a captured listing from a file or
stdin, resolves configuration (defaults, environment, CLI overrides), runs
the pipeline and prints either the listing (condensed or untouched) or a
JSON report.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from lssuppress.core.pipeline.engine import run_pipeline
from lssuppress.core.pipeline.stages.validator import validate_config
from lssuppress.core.processing.tokenizer import configure_tokenizer
from lssuppress.domain.config import load_config
from lssuppress.domain.pipeline_models import CondenseResult
from lssuppress.infra.logging import LoggingConfig, configure_logging, get_logger
from lssuppress.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 2 unreadable input, 130 interrupted).
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration hierarchy: defaults < environment < CLI flags
    raw_conf = load_config()
    raw_conf.update(cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap: level and file from config, --debug already folded in
    configure_logging(LoggingConfig.from_app_config(clean_conf))

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 4. Input acquisition
    try:
        text = _read_input(args.input_path)
    except OSError as e:
        msg = f"Cannot read input '{args.input_path}': {e}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    # 5. Pipeline execution phase
    if args.tokens and args.heuristic_tokens:
        configure_tokenizer(use_tiktoken=False)

    result = run_pipeline(
        args.command,
        text,
        clean_conf,
        check_command=args.command is not None,
        measure_tokens=bool(args.tokens),
    )

    # 6. Output rendering phase
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_listing(result, text)

    if args.stats:
        _print_stats(result)
    if args.tokens and not args.json_output:
        _print_tokens(result.summary)

    return 0

# -----------------------------------------------------------------------------
# INPUT
# -----------------------------------------------------------------------------

def _read_input(path: Optional[str]) -> str:
    """Read the listing from a file, or from stdin when no path (or '-') is given."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_listing(result: CondenseResult, original: str) -> None:
    """Write the condensed listing, or the original text byte-for-byte."""
    if result.rewritten and result.text is not None:
        sys.stdout.write(result.text + "\n")
    else:
        sys.stdout.write(original)
    sys.stdout.flush()


def _print_stats(result: CondenseResult) -> None:
    """Render per-top-level-directory statistics as a table on stderr."""
    rows = sorted(result.stats.items(), key=lambda kv: (-kv[1].entries, kv[0]))
    width = max([len("directory")] + [len(name) for name, _ in rows])

    print(f"{'directory':<{width}}  {'blocks':>7}  {'entries':>8}  status", file=sys.stderr)
    for name, s in rows:
        status = "suppressed" if name in result.suppressed else "kept"
        print(f"{name:<{width}}  {s.blocks:>7}  {s.entries:>8}  {status}", file=sys.stderr)
    print(
        f"{result.block_count} block(s), {len(result.suppressed)} suppressed, "
        f"{result.original_chars} -> {result.rewritten_chars} chars ({result.reason})",
        file=sys.stderr,
    )


def _print_tokens(summary: Dict[str, Any]) -> None:
    if "tokens_before" not in summary:
        return
    print(
        f"Tokens: {summary['tokens_before']:,} -> {summary['tokens_after']:,} "
        f"(saved {summary['tokens_saved']:,})",
        file=sys.stderr,
    )

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
