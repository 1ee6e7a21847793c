from __future__ import annotations

"""
Recursive Listing Parser.

Splits the free-text output of `ls -R` into per-directory blocks. The only
structure the format offers is a colon-terminated header line per directory
and blank lines between sections, so the parser is a single linear pass that
never fails: any line it cannot place becomes an entry of the current block.
"""

import logging
from typing import List, Optional

from lssuppress.domain.constants import (
    HEADER_SUFFIX,
    PATH_SEPARATOR,
    PLACEHOLDER_ROOT_HEADER,
    ROOT_ALIASES,
    ROOT_MARKER,
)
from lssuppress.domain.listing_models import Block

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_listing(text: str) -> List[Block]:
    """
    Parse raw recursive listing text into an ordered sequence of blocks.

    Lines are right-trimmed (which also drops a trailing carriage return) and
    blank lines are skipped. A line ending with ':' opens a new block; every
    other line is a left-trimmed entry of the current block. Entries that
    appear before any header are attached to a synthesized root block.

    Args:
        text: Captured stdout of the listing command.

    Returns:
        List[Block]: Blocks in the order their headers appeared.
    """
    blocks: List[Block] = []
    header: Optional[str] = None
    entries: List[str] = []

    for raw in text.split("\n"):
        line = raw.rstrip()
        if not line.strip():
            continue

        if is_header_line(line):
            if header is not None:
                blocks.append(_close_block(header, entries))
            header, entries = line, []
            continue

        if header is None:
            # No header seen yet: assume the root listing
            logger.debug("Entry before any header; synthesizing root block.")
            header = PLACEHOLDER_ROOT_HEADER

        entries.append(line.strip())

    if header is not None:
        blocks.append(_close_block(header, entries))

    logger.debug(f"Parsed {len(blocks)} block(s) from {len(text)} chars of listing output.")
    return blocks


def is_header_line(line: str) -> bool:
    """Return True if a (right-trimmed) line introduces a directory block."""
    return line.rstrip().endswith(HEADER_SUFFIX)


def normalize_header_path(line: str) -> str:
    """
    Derive a block path from its header line.

    '.:' and './:' map to the root marker; other paths lose the colon and
    any trailing separator ('./src/:' -> './src'). A bare '/' is kept.
    """
    path = line.rstrip()[:-len(HEADER_SUFFIX)].strip()
    if path in ROOT_ALIASES:
        return ROOT_MARKER
    return path.rstrip(PATH_SEPARATOR) or path


def find_root_block(blocks: List[Block]) -> Optional[Block]:
    """Return the first root block of a parsed listing, if any."""
    for block in blocks:
        if block.is_root:
            return block
    return None


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _close_block(header: str, entries: List[str]) -> Block:
    """Freeze a finished section into a Block."""
    return Block(path=normalize_header_path(header), header=header, entries=tuple(entries))
