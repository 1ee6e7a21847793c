from __future__ import annotations

"""
Unit tests for the domain data models.
"""

import dataclasses

import pytest

from lssuppress.core.analysis.listing_parser import parse_listing
from lssuppress.domain.listing_models import Block, TopDirStats
from lssuppress.domain.pipeline_models import (
    REASON_SUPPRESSED,
    REASON_WITHIN_LIMITS,
    CondenseResult,
    create_passthrough_result,
    create_rewrite_result,
)


def test_block_root_detection() -> None:
    assert Block(".", ".:").is_root
    assert not Block("./src", "./src:").is_root


def test_block_entries_are_frozen_to_a_tuple() -> None:
    source = ["x", "y"]
    block = Block("./a", "./a:", source)
    source.append("z")

    assert block.entries == ("x", "y")
    assert not hasattr(block.entries, "append")
    assert Block("./b", "./b:").entries == ()


def test_parsed_blocks_cannot_be_extended() -> None:
    block = parse_listing(".:\nsrc\n")[0]

    with pytest.raises(AttributeError):
        block.entries.append("intruder")
    assert block.entries == ("src",)


def test_block_is_frozen() -> None:
    block = Block("./a", "./a:")
    with pytest.raises(dataclasses.FrozenInstanceError):
        block.path = "./b"


def test_top_dir_stats_add() -> None:
    stats = TopDirStats()
    stats.add(Block("./a", "./a:", ["1", "2"]))
    stats.add(Block("./a/b", "./a/b:", []))

    assert stats == TopDirStats(blocks=2, entries=2)


def test_passthrough_result() -> None:
    result = create_passthrough_result(REASON_WITHIN_LIMITS, "abc", 2, {"a": TopDirStats(1, 1)})

    assert result.rewritten is False
    assert result.text is None
    assert result.original_chars == result.rewritten_chars == 3
    assert result.block_count == 2
    assert result.suppressed == {}
    assert result.summary == {}


def test_passthrough_result_with_non_text_original() -> None:
    result = create_passthrough_result("no_output", None)

    assert result.original_chars == 0
    assert result.stats == {}


def test_rewrite_result() -> None:
    stats = {"a": TopDirStats(50, 10)}
    result = create_rewrite_result("short", "a much longer text", 51, stats, stats, {"k": 1})

    assert result.rewritten is True
    assert result.reason == REASON_SUPPRESSED
    assert result.text == "short"
    assert result.original_chars == 18
    assert result.rewritten_chars == 5
    assert result.summary == {"k": 1}


def test_empty_rewrite_is_distinct_from_passthrough() -> None:
    """An empty replacement is still a replacement."""
    result = create_rewrite_result("", "x", 1, {}, {"a": TopDirStats(1, 1)})

    assert result.rewritten is True
    assert result.text == ""


def test_result_is_frozen() -> None:
    result = CondenseResult(rewritten=False, text=None, reason="x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.text = "y"
