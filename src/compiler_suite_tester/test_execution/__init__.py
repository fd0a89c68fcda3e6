"""Test execution domain exports."""

from .console_reporter import ConsoleReporter
from .execution_contracts import (
    CaseReport,
    CaseStatus,
    OutputFormat,
    RunnerOptions,
    SuiteSummary,
)
from .suite_executor import (
    SuiteReporter,
    default_thread_count,
    execute_suite,
    run_case,
    select_cases,
)

__all__ = [
    "ConsoleReporter",
    "CaseReport",
    "CaseStatus",
    "OutputFormat",
    "RunnerOptions",
    "SuiteSummary",
    "SuiteReporter",
    "default_thread_count",
    "execute_suite",
    "run_case",
    "select_cases",
]
