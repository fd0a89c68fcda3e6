"""Tests for the suite run use-case service."""

from __future__ import annotations

import io
import sys
import textwrap
from pathlib import Path

import pytest
from compiler_suite_tester.configuration import ConfigurationError
from compiler_suite_tester.fixture_discovery import DiscoveryError
from compiler_suite_tester.run_execution import SuiteIOError, SuiteRunRequest, run_test_suite
from compiler_suite_tester.suite_building import descriptor_builder
from compiler_suite_tester.test_execution import OutputFormat, RunnerOptions

FAKE_COMPILER = textwrap.dedent(
    """\
    #!{python}
    import sys
    from pathlib import Path

    source = Path(sys.argv[-1]).read_text(encoding="utf-8")
    if "REJECT" in source:
        print("error: rejected", file=sys.stderr)
        sys.exit(1)
    """
)


class _BrokenStream(io.StringIO):
    def write(self, text: str) -> int:
        raise OSError(28, "No space left on device")


def _project(tmp_path: Path) -> tuple[Path, Path]:
    root = tmp_path / "project"
    ui = root / "tests" / "ui"
    (ui / "a").mkdir(parents=True)
    (ui / "a" / "b.sol").write_text("contract B {}\n", encoding="utf-8")
    (ui / "a" / "c.sol").write_text(
        "//@ revisions: legacy default\ncontract C {}\n", encoding="utf-8"
    )
    (ui / "skipped.sol").write_text("//@ ignore-test: reason X\n// REJECT\n", encoding="utf-8")
    binary = tmp_path / "fake-compiler"
    binary.write_text(FAKE_COMPILER.format(python=sys.executable), encoding="utf-8")
    binary.chmod(0o755)
    return root, binary


def _request(root: Path, binary: Path, **overrides) -> SuiteRunRequest:
    values = {
        "binary_path": binary,
        "root_dir": root,
        "options": RunnerOptions(output_format=OutputFormat.PRETTY, test_threads=2),
        "environ": {},
        "mode_override": "ui",
    }
    values.update(overrides)
    return SuiteRunRequest(**values)


def test_full_run_passes_and_reports_ignored_cases(tmp_path: Path) -> None:
    root, binary = _project(tmp_path)
    stream = io.StringIO()

    outcome = run_test_suite(_request(root, binary), stream=stream)

    assert outcome.exit_code == 0
    assert outcome.case_count == 4
    output = stream.getvalue()
    assert "test [ui] tests/ui/a/b.sol ... ok" in output
    assert "test [ui] tests/ui/a/c.sol#legacy ... ok" in output
    assert "test [ui] tests/ui/a/c.sol#default ... ok" in output
    assert "test [ui] tests/ui/skipped.sol ... ignored, reason X" in output
    assert (root / "target" / "tester" / "tests" / "ui" / "a").is_dir()


def test_failing_fixture_sets_failure_exit_code(tmp_path: Path) -> None:
    root, binary = _project(tmp_path)
    (root / "tests" / "ui" / "broken.sol").write_text("// REJECT\n", encoding="utf-8")
    stream = io.StringIO()

    outcome = run_test_suite(_request(root, binary), stream=stream)

    assert outcome.exit_code == 1
    assert "---- [ui] tests/ui/broken.sol stdout ----" in stream.getvalue()


def test_list_only_does_not_execute(tmp_path: Path) -> None:
    root, binary = _project(tmp_path)
    (root / "tests" / "ui" / "broken.sol").write_text("// REJECT\n", encoding="utf-8")
    stream = io.StringIO()

    outcome = run_test_suite(
        _request(root, binary, options=RunnerOptions(list_only=True)), stream=stream
    )

    assert outcome.exit_code == 0
    assert outcome.summary is None
    assert stream.getvalue().splitlines() == [
        "[ui] tests/ui/a/b.sol: test",
        "[ui] tests/ui/a/c.sol#default: test",
        "[ui] tests/ui/a/c.sol#legacy: test",
        "[ui] tests/ui/broken.sol: test",
        "[ui] tests/ui/skipped.sol: test",
    ]


def test_unknown_mode_aborts_before_discovery(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    root, binary = _project(tmp_path)

    def _fail_discovery(*args, **kwargs):
        raise AssertionError("discovery must not run")

    monkeypatch.setattr(descriptor_builder, "collect_fixtures", _fail_discovery)

    with pytest.raises(ConfigurationError, match="unknown mode: bogus"):
        run_test_suite(
            _request(root, binary, environ={"TESTER_MODE": "bogus"}, mode_override=None)
        )
    assert not (root / "target").exists()


def test_reporter_io_failure_is_a_harness_error(tmp_path: Path) -> None:
    root, binary = _project(tmp_path)
    stream = _BrokenStream()

    with pytest.raises(SuiteIOError, match="I/O failure during tests"):
        run_test_suite(_request(root, binary), stream=stream)


def test_missing_root_of_an_active_mode_aborts_before_execution(tmp_path: Path) -> None:
    root, binary = _project(tmp_path)
    stream = io.StringIO()

    with pytest.raises(DiscoveryError, match="testdata/solidity/test"):
        run_test_suite(_request(root, binary, mode_override=None), stream=stream)
    assert stream.getvalue() == ""
