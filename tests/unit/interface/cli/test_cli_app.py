from __future__ import annotations

"""
Unit tests for the CLI application controller.

Runs `main` in-process with patched streams and logging bootstrap.
"""

import io
import json
from unittest.mock import patch

import pytest

from lssuppress.interface.cli.app import main


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    for var in ("LS_HOOK_TOPDIR_MAX_BLOCKS", "LS_HOOK_TOPDIR_MAX_ENTRIES", "LS_HOOK_LOG_LEVEL", "LS_HOOK_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    with patch("lssuppress.interface.cli.app.configure_logging"):
        yield


def test_listing_from_stdin(monkeypatch, capsys, big_target_listing: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(big_target_listing))

    assert main([]) == 0

    out = capsys.readouterr().out
    assert out.startswith(".:\nsrc\ntarget  # suppressed")
    assert out.endswith("main.rs\n")


def test_passthrough_is_verbatim(monkeypatch, capsys, small_listing: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(small_listing))

    assert main(["--max-entries", "100"]) == 0

    assert capsys.readouterr().out == small_listing


def test_stats_table(tmp_path, capsys, big_target_listing: str) -> None:
    path = tmp_path / "out.txt"
    path.write_text(big_target_listing, encoding="utf-8")

    assert main(["-i", str(path), "--stats"]) == 0

    err = capsys.readouterr().err.splitlines()
    assert err[0].split() == ["directory", "blocks", "entries", "status"]
    assert err[1].split() == ["target", "1", "2000", "suppressed"]
    assert err[2].split() == ["src", "1", "1", "kept"]
    assert "1 suppressed" in err[3]


def test_token_report(monkeypatch, capsys, big_target_listing: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(big_target_listing))

    with patch("lssuppress.core.pipeline.engine.estimate_savings",
               return_value={"tokens_before": 5000, "tokens_after": 20, "tokens_saved": 4980}):
        assert main(["--tokens"]) == 0

    assert "Tokens: 5,000 -> 20 (saved 4,980)" in capsys.readouterr().err


def test_json_includes_token_estimates(monkeypatch, capsys, big_target_listing: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(big_target_listing))

    with patch("lssuppress.core.pipeline.engine.estimate_savings",
               return_value={"tokens_before": 9, "tokens_after": 3, "tokens_saved": 6}):
        assert main(["--json", "--tokens"]) == 0

    captured = capsys.readouterr()
    assert json.loads(captured.out)["summary"]["tokens_saved"] == 6
    assert "Tokens:" not in captured.err


def test_dump_config_does_not_read_input(capsys) -> None:
    with patch("lssuppress.interface.cli.app._read_input") as mock_read:
        assert main(["--dump-config", "--max-blocks", "12"]) == 0

    mock_read.assert_not_called()
    assert json.loads(capsys.readouterr().out)["max_blocks"] == 12


def test_unreadable_input(tmp_path, capsys) -> None:
    assert main(["-i", str(tmp_path / "nope.txt")]) == 2

    assert "ERROR: Cannot read input" in capsys.readouterr().err


def test_keyboard_interrupt(capsys) -> None:
    with patch("lssuppress.interface.cli.app._read_input", side_effect=KeyboardInterrupt):
        assert main([]) == 130


def test_log_level_comes_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("LS_HOOK_LOG_LEVEL", "error")

    with patch("lssuppress.interface.cli.app.configure_logging") as mock_configure:
        assert main(["--dump-config"]) == 0

    assert mock_configure.call_args.args[0].level == "ERROR"


def test_debug_flag_overrides_environment_level(monkeypatch) -> None:
    monkeypatch.setenv("LS_HOOK_LOG_LEVEL", "ERROR")

    with patch("lssuppress.interface.cli.app.configure_logging") as mock_configure:
        assert main(["--dump-config", "--debug"]) == 0

    assert mock_configure.call_args.args[0].level == "DEBUG"


def test_heuristic_tokens_disables_tiktoken(monkeypatch, capsys, small_listing: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(small_listing))

    with patch("lssuppress.interface.cli.app.configure_tokenizer") as mock_tokenizer, \
            patch("lssuppress.core.pipeline.engine.estimate_savings",
                  return_value={"tokens_before": 4, "tokens_after": 4, "tokens_saved": 0}):
        assert main(["--tokens", "--heuristic-tokens"]) == 0

    mock_tokenizer.assert_called_once_with(use_tiktoken=False)


def test_tiktoken_is_left_alone_by_default(monkeypatch, small_listing: str) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO(small_listing))

    with patch("lssuppress.interface.cli.app.configure_tokenizer") as mock_tokenizer:
        assert main([]) == 0

    mock_tokenizer.assert_not_called()
