"""CLI behaviour tests."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from codeintel.cli import _build_parser, main
from tests._fixtures.intel_builder import IntelBuilder


def test_cli_defaults_to_session_start() -> None:
    args = _build_parser().parse_args([])

    assert args.command is None
    assert args.cwd == "."
    assert args.verbose is False


def test_cli_accepts_options_after_command() -> None:
    args = _build_parser().parse_args(["session-start", "--verbose", "--cwd", "proj"])

    assert args.command == "session-start"
    assert args.verbose is True
    assert args.cwd == "proj"


def test_main_prints_summary_for_startup(
    intel_builder: IntelBuilder, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    intel_builder.write_index({"a.js": ["x"]})
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps({"source": "startup"})))

    status = main(["--cwd", str(intel_builder.path())])

    captured = capsys.readouterr()
    assert status == 0
    assert captured.out == (
        "<codebase-intelligence>\nIndexed files: 1\n\nTotal exports: 1\nExports: x\n</codebase-intelligence>"
    )


def test_main_is_silent_without_intel(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO('{"source": "startup"}'))

    assert main(["--cwd", str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""


def test_usage_errors_still_exit_successfully(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--no-such-flag"]) == 0
    assert capsys.readouterr().out == ""


def test_show_ignores_session_source(intel_builder: IntelBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    intel_builder.write_index({"a.js": [], "b.js": []})

    assert main(["show", str(intel_builder.path())]) == 0

    out = capsys.readouterr().out
    assert "Indexed files: 2" in out


def test_show_reports_missing_intel(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["show", str(tmp_path)]) == 0

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "No codebase intelligence found" in captured.err
