from __future__ import annotations

"""
Recursive Listing Command Classifier.

Decides whether a shell command string is an `ls` invocation whose output
is sectioned by directory. This is a documented regex heuristic, not a shell
parser: flags supplied through variables, aliases or subshells are not seen.
"""

import re
from typing import Any

from lssuppress.domain.constants import LISTING_TOOL

# -----------------------------------------------------------------------------
# PATTERNS
# -----------------------------------------------------------------------------

# Leading NAME=value assignments, then the listing tool as a whole token
_INVOCATION_RX = re.compile(
    r"^(?:\w+=\S*\s+)*" + re.escape(LISTING_TOOL) + r"(?=\s|$)"
)

# Short-flag cluster with a single leading dash that contains 'R' (-R, -laR, -Ra)
_SHORT_RECURSIVE_RX = re.compile(r"(?:^|\s)-[^\s-]*R\S*")

# Long form as a standalone word
_LONG_RECURSIVE_RX = re.compile(r"(?:^|\s)--recursive(?=\s|$)")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def is_listing_invocation(command: Any) -> bool:
    """
    Check that the command runs the listing tool itself.

    The tool name must be the first token once environment assignments are
    skipped, so `./bin/ls-wrapper -R` or `pls -R` never match.
    """
    if not isinstance(command, str):
        return False
    return _INVOCATION_RX.match(command.strip()) is not None


def is_recursive_listing(command: Any) -> bool:
    """
    Determine whether a command is a recursive directory listing.

    Args:
        command: Raw command string as passed to the shell tool. Any other
                 type is rejected.

    Returns:
        bool: True if the command is `ls` with `-R` in a flag cluster or
              with `--recursive`.
    """
    if not isinstance(command, str):
        return False

    cmd = command.strip()
    match = _INVOCATION_RX.match(cmd)
    if match is None:
        return False

    remainder = cmd[match.end():]
    return bool(
        _SHORT_RECURSIVE_RX.search(remainder) or _LONG_RECURSIVE_RX.search(remainder)
    )
