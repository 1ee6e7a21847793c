from __future__ import annotations

"""
Tool Result Hook Adapter.

Binds the pure condensing pipeline to a host that calls back once per
completed tool execution and accepts an optional replacement payload.
The adapter never raises: whatever happens, the host either receives
`{"result": <text>}` or None, meaning "keep the original output".
"""

import logging
from typing import Any, Callable, Dict, Optional

from lssuppress.core.analysis.classifier import is_recursive_listing
from lssuppress.core.pipeline.engine import run_pipeline
from lssuppress.core.pipeline.stages.validator import validate_config
from lssuppress.domain.config import load_config
from lssuppress.domain.constants import REPLACEMENT_FIELD
from lssuppress.interface.hook.extractor import (
    extract_command,
    extract_output,
    extract_tool_name,
)

logger = logging.getLogger(__name__)

HookPayload = Optional[Dict[str, str]]
ToolResultHandler = Callable[[Any], HookPayload]

TOOL_RESULT_EVENT = "tool_result"


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_config(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Produce a validated configuration, reading the environment if needed.

    Args:
        config: Explicit configuration; when None the environment is read.

    Returns:
        Dict[str, Any]: Normalized configuration.
    """
    raw = load_config() if config is None else config
    cfg, warnings = validate_config(raw, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")
    return cfg


def handle_tool_result(event: Any, config: Optional[Dict[str, Any]] = None) -> HookPayload:
    """
    Process one tool result event.

    Gates, in order: the tool name must be the host's shell tool, the
    command must be a recursive listing, and an output string must be
    extractable. Any failed gate returns None before parsing starts.

    Args:
        event: Host event (mapping or object).
        config: Validated configuration; resolved from the environment if None.

    Returns:
        HookPayload: Replacement payload, or None to keep the original.
    """
    try:
        cfg = resolve_config(config)

        tool_name = extract_tool_name(event)
        if tool_name != cfg["host_tool_name"]:
            return None

        command = extract_command(event)
        if not is_recursive_listing(command):
            return None

        output = extract_output(event)
        if not output:
            logger.debug(f"No output extractable for command {command!r}.")
            return None

        result = run_pipeline(command, output, cfg)
        if not result.rewritten or result.text is None:
            return None

        return {REPLACEMENT_FIELD: result.text}

    except Exception:
        logger.exception("Listing condenser failed; keeping original output.")
        return None


def create_handler(config: Optional[Dict[str, Any]] = None) -> ToolResultHandler:
    """
    Build a handler bound to a configuration resolved once, at creation.

    Args:
        config: Explicit configuration; when None the environment is read now.

    Returns:
        ToolResultHandler: Callable taking one event.
    """
    cfg = resolve_config(config)

    def _handler(event: Any) -> HookPayload:
        return handle_tool_result(event, cfg)

    return _handler


def register(host: Any, config: Optional[Dict[str, Any]] = None) -> ToolResultHandler:
    """
    Subscribe the condenser to a host exposing `on(event_name, callback)`.

    Returns:
        ToolResultHandler: The registered callback.
    """
    handler = create_handler(config)
    host.on(TOOL_RESULT_EVENT, handler)
    logger.debug(f"Registered listing condenser on '{TOOL_RESULT_EVENT}'.")
    return handler
