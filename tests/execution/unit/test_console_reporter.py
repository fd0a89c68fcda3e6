"""Console reporter tests."""

from __future__ import annotations

import io
import json
from pathlib import Path, PurePosixPath

from compiler_suite_tester.fixture_discovery import FixturePath
from compiler_suite_tester.suite_contracts import TestCase, TestMode, TestResult
from compiler_suite_tester.test_execution import (
    CaseReport,
    CaseStatus,
    ConsoleReporter,
    OutputFormat,
    SuiteSummary,
)

REPORTS = (
    CaseReport(name="[ui] a.sol", status=CaseStatus.OK),
    CaseReport(
        name="[ui] b.sol",
        status=CaseStatus.FAILED,
        message="test failed",
        diagnostics=("expected exit code 0, got 1",),
    ),
    CaseReport(name="[ui] c.sol", status=CaseStatus.IGNORED, message="reason X"),
)


def _render(output_format: OutputFormat) -> str:
    stream = io.StringIO()
    reporter = ConsoleReporter(output_format, stream=stream)
    reporter.suite_started(len(REPORTS))
    for report in REPORTS:
        reporter.case_finished(report)
    reporter.suite_finished(SuiteSummary(reports=REPORTS, filtered_out=4))
    return stream.getvalue()


def test_pretty_output_lists_each_case_and_failure_details() -> None:
    output = _render(OutputFormat.PRETTY)

    assert "running 3 tests" in output
    assert "test [ui] a.sol ... ok" in output
    assert "test [ui] b.sol ... FAILED" in output
    assert "test [ui] c.sol ... ignored, reason X" in output
    assert "---- [ui] b.sol stdout ----\nexpected exit code 0, got 1\ntest failed" in output
    assert "failures:\n    [ui] b.sol" in output
    assert "test result: FAILED. 1 passed; 1 failed; 1 ignored; 0 measured; 4 filtered out" in output


def test_terse_output_prints_one_mark_per_case() -> None:
    output = _render(OutputFormat.TERSE)

    assert ".Fi 3/3" in output
    assert "test [ui] a.sol ... ok" not in output


def test_json_output_emits_one_event_per_line() -> None:
    events = [json.loads(line) for line in _render(OutputFormat.JSON).splitlines() if line]

    assert events[0] == {"type": "suite", "event": "started", "test_count": 3}
    assert events[2]["event"] == "failed"
    assert events[2]["stdout"] == "expected exit code 0, got 1"
    assert events[3]["message"] == "reason X"
    assert events[-1]["event"] == "failed"
    assert events[-1]["filtered_out"] == 4


def test_passing_summary_reports_ok() -> None:
    stream = io.StringIO()
    reporter = ConsoleReporter(OutputFormat.PRETTY, stream=stream)

    reporter.suite_finished(SuiteSummary())

    assert "test result: ok. 0 passed; 0 failed; 0 ignored" in stream.getvalue()


def test_list_prints_names() -> None:
    stream = io.StringIO()
    case = TestCase(
        mode=TestMode.UI,
        fixture=FixturePath(path=Path("/a.sol"), relative_path=PurePosixPath("a.sol")),
        revision=None,
        display_name="[ui] a.sol",
        ignore_reason=None,
        run=lambda: TestResult.PASSED,
    )

    ConsoleReporter(OutputFormat.PRETTY, stream=stream).list_cases([case])

    assert stream.getvalue() == "[ui] a.sol: test\n\n1 test, 0 benchmarks\n"
