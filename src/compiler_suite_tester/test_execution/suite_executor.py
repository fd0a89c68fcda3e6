"""Parallel execution of built test cases."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Protocol

from compiler_suite_tester.suite_contracts import TestCase, TestCaseFailed

from .execution_contracts import CaseReport, CaseStatus, RunnerOptions, SuiteSummary

_LOGGER = logging.getLogger(__name__)


class SuiteReporter(Protocol):
    """Receives progress events; always called from the scheduling thread."""

    def suite_started(self, case_count: int) -> None: ...

    def case_finished(self, report: CaseReport) -> None: ...

    def suite_finished(self, summary: SuiteSummary) -> None: ...


def default_thread_count() -> int:
    """Use every processor this process may run on."""
    if hasattr(os, "sched_getaffinity"):
        return len(os.sched_getaffinity(0)) or 1
    return os.cpu_count() or 1


def select_cases(cases: Sequence[TestCase], options: RunnerOptions) -> tuple[TestCase, ...]:
    """Apply name filters, ``--skip`` patterns and ``--ignored`` in suite order."""
    return tuple(case for case in cases if _is_selected(case, options))


def _is_selected(case: TestCase, options: RunnerOptions) -> bool:
    name = case.display_name
    if options.filters:
        if options.exact:
            if name not in options.filters:
                return False
        elif not any(pattern in name for pattern in options.filters):
            return False
    if options.exact and name in options.skip:
        return False
    if not options.exact and any(pattern in name for pattern in options.skip):
        return False
    if options.ignored and not case.ignored:
        return False
    return True


def execute_suite(
    cases: Sequence[TestCase], options: RunnerOptions, reporter: SuiteReporter
) -> SuiteSummary:
    """Run the selected cases on a thread pool and report each outcome."""
    started = time.monotonic()
    selected = select_cases(cases, options)
    reporter.suite_started(len(selected))

    reports: list[CaseReport] = []
    runnable: list[TestCase] = []
    for case in selected:
        if case.ignored and not (options.ignored or options.include_ignored):
            report = CaseReport(
                name=case.display_name, status=CaseStatus.IGNORED, message=case.ignore_reason
            )
            reports.append(report)
            reporter.case_finished(report)
        else:
            runnable.append(case)

    if runnable:
        max_workers = max(1, options.test_threads or default_thread_count())
        _LOGGER.debug("running %d cases on %d threads", len(runnable), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(run_case, case) for case in runnable]
            for future in as_completed(futures):
                report = future.result()
                reports.append(report)
                reporter.case_finished(report)

    summary = SuiteSummary(
        reports=tuple(reports),
        filtered_out=len(cases) - len(selected),
        duration_seconds=time.monotonic() - started,
    )
    reporter.suite_finished(summary)
    return summary


def run_case(case: TestCase) -> CaseReport:
    """Invoke a case's run callable; any exception fails only this case."""
    started = time.monotonic()
    try:
        case.run()
    except TestCaseFailed as exc:
        return CaseReport(
            name=case.display_name,
            status=CaseStatus.FAILED,
            message=str(exc),
            diagnostics=exc.diagnostics,
            duration_seconds=time.monotonic() - started,
        )
    except Exception as exc:  # pylint: disable=broad-exception-caught
        _LOGGER.debug("%s raised", case.display_name, exc_info=True)
        return CaseReport(
            name=case.display_name,
            status=CaseStatus.FAILED,
            message=f"{type(exc).__name__}: {exc}",
            duration_seconds=time.monotonic() - started,
        )
    return CaseReport(
        name=case.display_name,
        status=CaseStatus.OK,
        duration_seconds=time.monotonic() - started,
    )
