from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: sample `ls -R` outputs, host events and config dicts.
"""

import os
import sys
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Listing Builders
# -----------------------------------------------------------------------------
def build_listing(sections: List[tuple]) -> str:
    """
    Render (header, entries) pairs the way `ls -R` prints them.

    Sections are separated by a blank line and the text ends with a newline.
    """
    parts = []
    for header, entries in sections:
        parts.append("\n".join([header] + list(entries)))
    return "\n\n".join(parts) + "\n"


@pytest.fixture
def listing_builder() -> Callable[[List[tuple]], str]:
    """Expose the listing builder to tests."""
    return build_listing


@pytest.fixture
def big_target_listing() -> str:
    """
    Rust-like project where ./target holds 2000 entries.

    Structure:
    .
      src/main.rs
      target/ (2000 artifacts)
    """
    artifacts = [f"artifact_{i:04d}.o" for i in range(2000)]
    return build_listing([
        (".:", ["src", "target"]),
        ("./target:", artifacts),
        ("./src:", ["main.rs"]),
    ])


@pytest.fixture
def small_listing() -> str:
    """Small project well under every threshold."""
    return build_listing([
        (".:", ["Cargo.toml", "src", "target"]),
        ("./src:", ["lib.rs", "main.rs"]),
        ("./target:", ["a.o", "b.o", "c.o", "d.o", "e.o"]),
    ])


@pytest.fixture
def make_event() -> Callable[..., Dict[str, Any]]:
    """Factory for host tool_result events using the direct-string result shape."""
    def _make(command: str, output: Any, tool_name: str = "bash") -> Dict[str, Any]:
        return {
            "toolName": tool_name,
            "input": {"command": command},
            "result": output,
        }
    return _make


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'lssuppress.domain.config'.
    """
    return {
        "max_blocks": 40,
        "max_entries": 1200,
        "host_tool_name": "bash",
        "log_level": "WARNING",
        "log_file": "",
    }
