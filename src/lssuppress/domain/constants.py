from __future__ import annotations

"""
Domain Constants.

Centralizes the names, thresholds and formats shared by the listing
condenser: the host tool gate, the environment overrides, the canonical
root marker and the inline suppression annotation.
"""

from typing import Final

# -----------------------------------------------------------------------------
# TOOL IDENTIFIERS
# -----------------------------------------------------------------------------

LISTING_TOOL: Final[str] = "ls"
DEFAULT_HOST_TOOL_NAME: Final[str] = "bash"

# -----------------------------------------------------------------------------
# SUPPRESSION THRESHOLDS
# -----------------------------------------------------------------------------

# How many directory headers (blocks) a top-level directory may produce
DEFAULT_MAX_BLOCKS: Final[int] = 40
# How many entries in total a top-level directory may produce
DEFAULT_MAX_ENTRIES: Final[int] = 1200

# -----------------------------------------------------------------------------
# ENVIRONMENT OVERRIDES
# -----------------------------------------------------------------------------

ENV_MAX_BLOCKS: Final[str] = "LS_HOOK_TOPDIR_MAX_BLOCKS"
ENV_MAX_ENTRIES: Final[str] = "LS_HOOK_TOPDIR_MAX_ENTRIES"
ENV_TOOL_NAME: Final[str] = "LS_HOOK_TOOL_NAME"
ENV_LOG_LEVEL: Final[str] = "LS_HOOK_LOG_LEVEL"
ENV_LOG_FILE: Final[str] = "LS_HOOK_LOG_FILE"

# -----------------------------------------------------------------------------
# LISTING FORMAT
# -----------------------------------------------------------------------------

ROOT_MARKER: Final[str] = "."
ROOT_ALIASES: Final[tuple] = (".", "./")
PLACEHOLDER_ROOT_HEADER: Final[str] = ".:"
HEADER_SUFFIX: Final[str] = ":"
PATH_SEPARATOR: Final[str] = "/"

SUPPRESSION_ANNOTATION: Final[str] = "{entry}  # suppressed ({blocks} dirs, {entries} entries)"

# Field under which the replacement payload is returned to the host
REPLACEMENT_FIELD: Final[str] = "result"
