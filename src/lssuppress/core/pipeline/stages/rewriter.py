from __future__ import annotations

"""
Output Rewriter Stage.

Reconstructs a recursive listing from its parsed blocks, eliding every
subtree under a suppressed top-level directory. The root listing is kept
and the entries naming suppressed directories get an inline annotation, so
the reader still sees that the directory exists and how large it is.
"""

from typing import List, Optional

from lssuppress.core.analysis.listing_parser import find_root_block
from lssuppress.core.pipeline.stages.policy import top_dir_of
from lssuppress.domain.constants import PATH_SEPARATOR, SUPPRESSION_ANNOTATION
from lssuppress.domain.listing_models import Block, SuppressionDecision, TopDirStats


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def rewrite_listing(blocks: List[Block], suppressed: SuppressionDecision) -> Optional[str]:
    """
    Build the condensed listing text.

    Args:
        blocks: Full parsed listing.
        suppressed: Top-level directories to elide, with their stats.

    Returns:
        Optional[str]: The reconstructed text, or None when nothing is
                       suppressed and the original output must be kept.
    """
    if not suppressed:
        return None

    out: List[str] = []

    # 1. Root listing, annotated
    root = find_root_block(blocks)
    if root is not None:
        out.append(root.header)
        for entry in root.entries:
            stats = suppressed.get(_strip_trailing_separator(entry))
            out.append(format_annotation(entry, stats) if stats else entry)
        out.append("")

    # 2. Surviving subtrees in original order
    for block in blocks:
        if block.is_root:
            continue
        top = top_dir_of(block.path)
        if top is not None and top in suppressed:
            continue
        out.append(block.header)
        out.extend(block.entries)
        out.append("")

    return "\n".join(out).rstrip()


def format_annotation(entry: str, stats: TopDirStats) -> str:
    """Append the suppression note to a root listing entry."""
    return SUPPRESSION_ANNOTATION.format(
        entry=entry, blocks=stats.blocks, entries=stats.entries
    )


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _strip_trailing_separator(entry: str) -> str:
    """'node_modules/' -> 'node_modules' (ls -F / -p mark directories this way)."""
    if entry.endswith(PATH_SEPARATOR):
        return entry[:-len(PATH_SEPARATOR)]
    return entry
