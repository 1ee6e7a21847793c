from __future__ import annotations

"""
Core condensing pipeline.

Coordinates the three stages over one command's captured output:
1. Gates on the command classifier and on having output at all.
2. Parses the output into per-directory blocks.
3. Aggregates stats and selects the top-level directories to suppress.
4. Rewrites the listing, or reports that the original must be kept.

Every function here is pure and works on freshly allocated local data, so
concurrent invocations never share state.
"""

import logging
from typing import Any, Dict, Optional

from lssuppress.core.analysis.classifier import is_recursive_listing
from lssuppress.core.analysis.listing_parser import parse_listing
from lssuppress.core.pipeline.stages.policy import aggregate_top_dir_stats, select_suppressed
from lssuppress.core.pipeline.stages.rewriter import rewrite_listing
from lssuppress.core.pipeline.stages.validator import validate_config
from lssuppress.core.processing.tokenizer import estimate_savings
from lssuppress.domain.pipeline_models import (
    REASON_NO_OUTPUT,
    REASON_NOT_LISTING,
    REASON_WITHIN_LIMITS,
    CondenseResult,
    create_passthrough_result,
    create_rewrite_result,
)

logger = logging.getLogger(__name__)


def condense_listing(output: str, max_blocks: int, max_entries: int) -> Optional[str]:
    """
    Condense raw `ls -R` output.

    Args:
        output: Captured listing text.
        max_blocks: Maximum blocks per top-level directory.
        max_entries: Maximum aggregated entries per top-level directory.

    Returns:
        Optional[str]: Replacement text, or None if nothing exceeds the limits.
    """
    blocks = parse_listing(output)
    suppressed = select_suppressed(aggregate_top_dir_stats(blocks), max_blocks, max_entries)
    return rewrite_listing(blocks, suppressed)


def run_pipeline(
        command: Any,
        output: Any,
        config: Optional[Dict[str, Any]] = None,
        *,
        check_command: bool = True,
        measure_tokens: bool = False,
) -> CondenseResult:
    """
    Execute the full condensing pipeline for one command execution.

    Args:
        command: Shell command that produced the output.
        output: Captured output text (anything else short-circuits).
        config: Configuration dictionary (raw or partial); validated here.
        check_command: If False, skip the classifier gate and treat the
                       output as recursive listing text.
        measure_tokens: If True, add token estimates to the summary.

    Returns:
        CondenseResult: Rewrite or pass-through outcome with statistics.
    """
    cfg, warnings = validate_config(config if config is not None else {}, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    max_blocks = cfg["max_blocks"]
    max_entries = cfg["max_entries"]
    summary: Dict[str, Any] = {"max_blocks": max_blocks, "max_entries": max_entries}

    # -------------------------------------------------------------------------
    # 1) Gates
    # -------------------------------------------------------------------------
    if check_command and not is_recursive_listing(command):
        logger.debug(f"Command is not a recursive listing: {command!r}")
        return create_passthrough_result(REASON_NOT_LISTING, output, summary_extra=summary)

    if not isinstance(output, str) or not output:
        logger.debug("No listing output to condense.")
        return create_passthrough_result(REASON_NO_OUTPUT, output, summary_extra=summary)

    # -------------------------------------------------------------------------
    # 2) Parse & Decide
    # -------------------------------------------------------------------------
    blocks = parse_listing(output)
    stats = aggregate_top_dir_stats(blocks)
    suppressed = select_suppressed(stats, max_blocks, max_entries)

    # -------------------------------------------------------------------------
    # 3) Rewrite
    # -------------------------------------------------------------------------
    text = rewrite_listing(blocks, suppressed)

    if measure_tokens:
        summary.update(estimate_savings(output, text))

    if text is None:
        logger.debug(f"All {len(stats)} top-level directories within limits; keeping output.")
        return create_passthrough_result(
            REASON_WITHIN_LIMITS, output, len(blocks), stats, summary_extra=summary
        )

    logger.info(
        f"Suppressed {len(suppressed)} top-level directories: {', '.join(suppressed)} "
        f"({len(output)} -> {len(text)} chars)."
    )
    return create_rewrite_result(text, output, len(blocks), stats, suppressed, summary_extra=summary)
