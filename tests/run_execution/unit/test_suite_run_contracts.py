"""Tests for run execution domain entities."""

from __future__ import annotations

from compiler_suite_tester.run_execution import SuiteRunOutcome, SuiteRunRequest
from compiler_suite_tester.test_execution import (
    CaseReport,
    CaseStatus,
    OutputFormat,
    SuiteSummary,
)


def test_run_request_defaults_to_terse_unfiltered_run() -> None:
    request = SuiteRunRequest(binary_path="/bin/compiler")

    assert request.options.output_format is OutputFormat.TERSE
    assert request.options.filters == ()
    assert request.mode_override is None
    assert request.bless is False


def test_outcome_exit_codes() -> None:
    passed = SuiteSummary(reports=(CaseReport(name="a", status=CaseStatus.OK),))
    failed = SuiteSummary(reports=(CaseReport(name="a", status=CaseStatus.FAILED),))

    assert SuiteRunOutcome(case_count=1, summary=passed).exit_code == 0
    assert SuiteRunOutcome(case_count=1, summary=failed).exit_code == 1
    assert SuiteRunOutcome(case_count=0, summary=SuiteSummary()).exit_code == 0
    assert SuiteRunOutcome(case_count=3, summary=None).exit_code == 0
