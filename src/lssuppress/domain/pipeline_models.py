from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object returned by the condensing pipeline to the
interface layers (hook adapter and CLI), together with the factory functions
that build it for the pass-through and rewrite outcomes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from lssuppress.domain.listing_models import SuppressionDecision, TopDirStats

# -----------------------------------------------------------------------------
# SHORT-CIRCUIT REASONS
# -----------------------------------------------------------------------------

REASON_NOT_LISTING = "not_recursive_listing"
REASON_NO_OUTPUT = "no_output"
REASON_WITHIN_LIMITS = "within_limits"
REASON_SUPPRESSED = "suppressed"

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CondenseResult:
    """
    Outcome of one pipeline invocation.

    A pass-through result carries `text=None`, which the caller must read as
    "leave the original output untouched". This is distinct from a rewrite
    whose text happens to be empty.

    Attributes:
        rewritten: Whether a replacement text was produced.
        text: Replacement text, or None for pass-through.
        reason: Why the pipeline stopped (see REASON_* constants).
        block_count: Number of blocks parsed from the output.
        stats: Aggregated stats for every top-level directory.
        suppressed: Subset of stats over either threshold.
        original_chars: Size of the original output.
        rewritten_chars: Size of the replacement (equals original on pass-through).
        summary: Free-form execution metadata (thresholds, token estimates).
    """
    rewritten: bool
    text: Optional[str]
    reason: str

    block_count: int = 0
    stats: Dict[str, TopDirStats] = field(default_factory=dict)
    suppressed: SuppressionDecision = field(default_factory=dict)

    original_chars: int = 0
    rewritten_chars: int = 0

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_passthrough_result(
        reason: str,
        original: Optional[str] = None,
        block_count: int = 0,
        stats: Optional[Dict[str, TopDirStats]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> CondenseResult:
    """
    Create a result instructing the caller to keep the original output.

    Args:
        reason: Short-circuit reason identifier.
        original: The untouched output, used only for size metrics.
        block_count: Blocks parsed before the decision (0 if never parsed).
        stats: Aggregates computed before the decision, if any.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        CondenseResult: An immutable pass-through result.
    """
    size = len(original) if isinstance(original, str) else 0
    return CondenseResult(
        rewritten=False,
        text=None,
        reason=reason,
        block_count=block_count,
        stats=stats or {},
        original_chars=size,
        rewritten_chars=size,
        summary=summary_extra or {},
    )


def create_rewrite_result(
        text: str,
        original: str,
        block_count: int,
        stats: Dict[str, TopDirStats],
        suppressed: SuppressionDecision,
        summary_extra: Optional[Dict[str, Any]] = None
) -> CondenseResult:
    """
    Create a result carrying the condensed replacement text.

    Args:
        text: Reconstructed listing.
        original: The raw listing it replaces.
        block_count: Blocks parsed from the raw listing.
        stats: Aggregates for every top-level directory.
        suppressed: Directories elided from the output.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        CondenseResult: An immutable rewrite result.
    """
    return CondenseResult(
        rewritten=True,
        text=text,
        reason=REASON_SUPPRESSED,
        block_count=block_count,
        stats=stats,
        suppressed=suppressed,
        original_chars=len(original),
        rewritten_chars=len(text),
        summary=summary_extra or {},
    )
