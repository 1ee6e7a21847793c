from __future__ import annotations

"""
Suppression Policy Stage.

Aggregates block and entry counts per top-level directory (the first path
segment beneath the root) and selects the directories whose subtree is too
large to be shown in full.
"""

import logging
from typing import Dict, List, Optional

from lssuppress.domain.constants import PATH_SEPARATOR, ROOT_MARKER
from lssuppress.domain.listing_models import Block, SuppressionDecision, TopDirStats

logger = logging.getLogger(__name__)

_CWD_PREFIX = ROOT_MARKER + PATH_SEPARATOR


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def top_dir_of(path: str) -> Optional[str]:
    """
    Resolve the top-level directory a block path belongs to.

    Args:
        path: Normalized block path ('.', './target/debug', 'src', ...).

    Returns:
        Optional[str]: First path segment after the root, or None for the
                       root itself and for paths without any segment.
    """
    if path == ROOT_MARKER:
        return None
    if path.startswith(_CWD_PREFIX):
        path = path[len(_CWD_PREFIX):]
    segments = [seg for seg in path.split(PATH_SEPARATOR) if seg]
    return segments[0] if segments else None


def aggregate_top_dir_stats(blocks: List[Block]) -> Dict[str, TopDirStats]:
    """
    Compute block and entry totals for every top-level directory.

    The root block and blocks without a resolvable top-level directory do
    not contribute. Keys keep first-seen order.
    """
    stats: Dict[str, TopDirStats] = {}
    for block in blocks:
        if block.is_root:
            continue
        top = top_dir_of(block.path)
        if top is None:
            continue
        stats.setdefault(top, TopDirStats()).add(block)
    return stats


def select_suppressed(
        stats: Dict[str, TopDirStats],
        max_blocks: int,
        max_entries: int,
) -> SuppressionDecision:
    """
    Keep only the directories over either threshold.

    Comparisons are strict: a directory exactly at both limits is kept.
    """
    _check_threshold("max_blocks", max_blocks)
    _check_threshold("max_entries", max_entries)

    suppressed: SuppressionDecision = {}
    for top, s in stats.items():
        if s.blocks > max_blocks or s.entries > max_entries:
            suppressed[top] = s
            logger.debug(
                f"Suppressing '{top}': {s.blocks} block(s) (max {max_blocks}), "
                f"{s.entries} entries (max {max_entries})."
            )
    return suppressed


def decide_suppression(
        blocks: List[Block],
        max_blocks: int,
        max_entries: int,
) -> SuppressionDecision:
    """
    Aggregate the parsed blocks and return the directories to suppress.

    Args:
        blocks: Parsed listing.
        max_blocks: Maximum blocks per top-level directory.
        max_entries: Maximum aggregated entries per top-level directory.

    Returns:
        SuppressionDecision: Suppressed directory name -> its stats.
    """
    return select_suppressed(aggregate_top_dir_stats(blocks), max_blocks, max_entries)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _check_threshold(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"Threshold '{name}' must be a positive integer, received {value!r}.")
