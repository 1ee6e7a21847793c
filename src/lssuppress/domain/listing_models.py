from __future__ import annotations

"""
Recursive Listing Data Models.

Provides the structures produced while condensing an `ls -R` output: the
per-directory blocks emitted by the parser and the per-top-level-directory
aggregates consumed by the suppression policy.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

from lssuppress.domain.constants import ROOT_MARKER

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """
    One directory section of a recursive listing.

    Attributes:
        path: Normalized directory path ('.' for the root listing).
        header: Header line as written by the listing tool (right-trimmed).
        entries: Entry names in original order, duplicates included.
                 Stored as a tuple; any sequence is accepted.
    """
    path: str
    header: str
    entries: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, tuple):
            object.__setattr__(self, "entries", tuple(self.entries))

    @property
    def is_root(self) -> bool:
        return self.path == ROOT_MARKER


@dataclass
class TopDirStats:
    """
    Aggregated size of one immediate child directory of the root.

    Attributes:
        blocks: Number of blocks under the directory, its own block included.
        entries: Sum of entry counts across those blocks.
    """
    blocks: int = 0
    entries: int = 0

    def add(self, block: Block) -> None:
        self.blocks += 1
        self.entries += len(block.entries)


# Top-level directory name -> stats, for directories over either threshold
SuppressionDecision = Dict[str, TopDirStats]
