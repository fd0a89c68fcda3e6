"""Console rendering of suite progress and results."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import IO, Any

import click

from compiler_suite_tester.suite_contracts import TestCase

from .execution_contracts import CaseReport, CaseStatus, OutputFormat, SuiteSummary

TERSE_LINE_WIDTH = 88
_TERSE_MARKS = {CaseStatus.OK: ".", CaseStatus.FAILED: "F", CaseStatus.IGNORED: "i"}


class ConsoleReporter:
    """Writes libtest-style progress, failure details and a summary line."""

    def __init__(self, output_format: OutputFormat, stream: IO[str] | None = None) -> None:
        self._format = output_format
        self._stream = stream
        self._total = 0
        self._finished = 0

    def suite_started(self, case_count: int) -> None:
        self._total = case_count
        if self._format is OutputFormat.JSON:
            self._emit_json({"type": "suite", "event": "started", "test_count": case_count})
            return
        noun = "test" if case_count == 1 else "tests"
        self._echo(f"\nrunning {case_count} {noun}")

    def case_finished(self, report: CaseReport) -> None:
        self._finished += 1
        if self._format is OutputFormat.JSON:
            event: dict[str, Any] = {
                "type": "test",
                "event": report.status.value,
                "name": report.name,
                "exec_time": round(report.duration_seconds, 3),
            }
            if report.message is not None:
                event["message"] = report.message
            if report.diagnostics:
                event["stdout"] = "\n".join(report.diagnostics)
            self._emit_json(event)
        elif self._format is OutputFormat.PRETTY:
            self._echo(f"test {report.name} ... {_pretty_status(report)}")
        else:
            self._echo(_TERSE_MARKS[report.status], nl=False)
            if self._finished % TERSE_LINE_WIDTH == 0 or self._finished == self._total:
                self._echo(f" {self._finished}/{self._total}")

    def suite_finished(self, summary: SuiteSummary) -> None:
        passed = summary.count(CaseStatus.OK)
        failed = summary.count(CaseStatus.FAILED)
        ignored = summary.count(CaseStatus.IGNORED)
        if self._format is OutputFormat.JSON:
            self._emit_json(
                {
                    "type": "suite",
                    "event": "ok" if summary.passed else "failed",
                    "passed": passed,
                    "failed": failed,
                    "ignored": ignored,
                    "measured": 0,
                    "filtered_out": summary.filtered_out,
                    "exec_time": round(summary.duration_seconds, 3),
                }
            )
            return

        if summary.failures:
            self._echo("\nfailures:\n")
            for report in summary.failures:
                self._echo(f"---- {report.name} stdout ----")
                for line in report.diagnostics:
                    self._echo(line.rstrip("\n"))
                if report.message:
                    self._echo(report.message)
                self._echo("")
            self._echo("\nfailures:")
            for report in summary.failures:
                self._echo(f"    {report.name}")

        outcome = "ok" if summary.passed else "FAILED"
        self._echo(
            f"\ntest result: {outcome}. {passed} passed; {failed} failed; {ignored} ignored; "
            f"0 measured; {summary.filtered_out} filtered out; "
            f"finished in {summary.duration_seconds:.2f}s\n"
        )

    def list_cases(self, cases: Sequence[TestCase]) -> None:
        """Print the selected case names instead of running them."""
        for case in cases:
            self._echo(f"{case.display_name}: test")
        if self._format is not OutputFormat.TERSE:
            noun = "test" if len(cases) == 1 else "tests"
            self._echo(f"\n{len(cases)} {noun}, 0 benchmarks")

    def _emit_json(self, payload: dict[str, Any]) -> None:
        self._echo(json.dumps(payload, ensure_ascii=False))

    def _echo(self, message: str, *, nl: bool = True) -> None:
        click.echo(message, file=self._stream, nl=nl)


def _pretty_status(report: CaseReport) -> str:
    if report.status is CaseStatus.IGNORED:
        return f"ignored, {report.message}" if report.message else "ignored"
    if report.status is CaseStatus.FAILED:
        return "FAILED"
    return "ok"
