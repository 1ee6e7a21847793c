from __future__ import annotations

"""
Unit tests for the Configuration Domain.

Verifies default values and the environment overlay.
"""

from lssuppress.domain import constants as const
from lssuppress.domain.config import ENV_OVERRIDES, get_default_config, load_config


def test_default_config_values() -> None:
    cfg = get_default_config()

    assert cfg["max_blocks"] == const.DEFAULT_MAX_BLOCKS == 40
    assert cfg["max_entries"] == const.DEFAULT_MAX_ENTRIES == 1200
    assert cfg["host_tool_name"] == "bash"
    assert cfg["log_level"] == "WARNING"
    assert cfg["log_file"] == ""


def test_default_config_returns_fresh_dicts() -> None:
    first = get_default_config()
    first["max_blocks"] = 1

    assert get_default_config()["max_blocks"] == 40


def test_load_config_without_overrides() -> None:
    assert load_config({}) == get_default_config()


def test_load_config_overlays_raw_values() -> None:
    cfg = load_config({
        "LS_HOOK_TOPDIR_MAX_BLOCKS": "12",
        "LS_HOOK_TOPDIR_MAX_ENTRIES": "not-a-number",
        "LS_HOOK_TOOL_NAME": "shell",
    })

    # Coercion belongs to the validator
    assert cfg["max_blocks"] == "12"
    assert cfg["max_entries"] == "not-a-number"
    assert cfg["host_tool_name"] == "shell"


def test_load_config_ignores_blank_and_unrelated_variables() -> None:
    cfg = load_config({"LS_HOOK_TOPDIR_MAX_BLOCKS": "  ", "PATH": "/usr/bin"})

    assert cfg == get_default_config()


def test_load_config_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv(const.ENV_MAX_ENTRIES, "99")
    monkeypatch.delenv(const.ENV_MAX_BLOCKS, raising=False)

    cfg = load_config()

    assert cfg["max_entries"] == "99"


def test_every_override_targets_a_known_key() -> None:
    defaults = get_default_config()

    assert set(ENV_OVERRIDES.values()) <= set(defaults)
