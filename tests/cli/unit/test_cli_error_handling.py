"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from compiler_suite_tester.cli import main


def test_missing_required_option_is_a_harness_error(
    capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("TESTER_BINARY", raising=False)

    exit_code = main(["run"])
    captured = capsys.readouterr()

    assert exit_code == 101
    assert "Missing option" in captured.err
    assert "--binary" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_is_a_harness_error(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["run", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 101
    assert "No such option: --bogus" in captured.err


def test_conflicting_ignore_options_are_rejected(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    binary = tmp_path / "compiler"
    binary.write_text("", encoding="utf-8")

    exit_code = main(["run", "--binary", str(binary), "--ignored", "--include-ignored"])

    assert exit_code == 101
    assert "cannot be combined" in capsys.readouterr().err


def test_unknown_mode_override_aborts_with_diagnostic(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    binary = tmp_path / "compiler"
    binary.write_text("", encoding="utf-8")
    monkeypatch.setenv("TESTER_MODE", "json")

    exit_code = main(["run", "--binary", str(binary), "--root", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 101
    assert "error: unknown mode: json" in captured.err
    assert not (tmp_path / "target").exists()


def test_missing_binary_aborts_with_diagnostic(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("TESTER_MODE", raising=False)
    (tmp_path / "tests" / "ui").mkdir(parents=True)

    exit_code = main(["run", "--binary", str(tmp_path / "nope"), "--root", str(tmp_path)])

    assert exit_code == 101
    assert "Compiler binary not found" in capsys.readouterr().err
