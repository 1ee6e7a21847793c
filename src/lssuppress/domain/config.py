from __future__ import annotations

"""
Configuration Domain Management.

Produces the runtime configuration dictionary that drives the pipeline.
Defaults live here; overrides are read from the process environment once per
handler registration (hook) or per run (CLI). Values are kept raw at this
stage and normalized later by the validator stage.
"""

import logging
import os
from typing import Any, Dict, Mapping, Optional

from lssuppress.domain import constants as const

logger = logging.getLogger(__name__)

# Environment variable -> configuration key
ENV_OVERRIDES: Dict[str, str] = {
    const.ENV_MAX_BLOCKS: "max_blocks",
    const.ENV_MAX_ENTRIES: "max_entries",
    const.ENV_TOOL_NAME: "host_tool_name",
    const.ENV_LOG_LEVEL: "log_level",
    const.ENV_LOG_FILE: "log_file",
}


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
        # Suppression thresholds (per top-level directory)
        "max_blocks": const.DEFAULT_MAX_BLOCKS,
        "max_entries": const.DEFAULT_MAX_ENTRIES,

        # Host gate
        "host_tool_name": const.DEFAULT_HOST_TOOL_NAME,

        # Diagnostics
        "log_level": "WARNING",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config(env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Overlay environment overrides on top of the defaults.

    Blank variables are treated as absent. Values are not coerced here;
    callers pass the result through `validate_config`.

    Args:
        env: Mapping to read from. Defaults to `os.environ`.

    Returns:
        Dict[str, Any]: Raw merged configuration.
    """
    source = os.environ if env is None else env
    config = get_default_config()

    for var, key in ENV_OVERRIDES.items():
        raw = source.get(var)
        if raw is None or not str(raw).strip():
            continue
        config[key] = raw
        logger.debug(f"Config override from {var}: {key}={raw!r}")

    return config
