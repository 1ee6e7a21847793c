from __future__ import annotations

"""
Hook Process Entry Point.

Runs the condenser as an external hook command: one JSON tool event on
stdin, the replacement payload as JSON on stdout, or no output at all when
the original result should be kept. Logs go to stderr (and optionally a
rotating file) so stdout stays a clean channel for the host.
"""

import json
import sys
from typing import TextIO

from lssuppress.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from lssuppress.interface.hook.handler import handle_tool_result, resolve_config

logger = get_logger(__name__)


def run_hook(stdin: TextIO, stdout: TextIO) -> int:
    """
    Read one event, write the payload if there is one.

    Args:
        stdin: Stream carrying the JSON event.
        stdout: Stream receiving the JSON payload.

    Returns:
        int: Process exit code. Always 0: hook failures must not fail the
             host's command execution.
    """
    cfg = resolve_config()
    configure_logging(LoggingConfig.from_app_config(cfg))

    try:
        raw = stdin.read()
        if not raw.strip():
            logger.debug("Empty hook input.")
            return 0

        try:
            event = json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.error(f"Hook input is not valid JSON: {e}")
            return 0

        payload = handle_tool_result(event, cfg)
        if payload is not None:
            json.dump(payload, stdout, ensure_ascii=False)
            stdout.write("\n")
            stdout.flush()
        return 0
    except Exception:
        logger.exception("Hook runner failed; keeping original output.")
        return 0
    finally:
        shutdown_logging()


def main() -> int:
    """Console script entry point (`lssuppress-hook`)."""
    return run_hook(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
