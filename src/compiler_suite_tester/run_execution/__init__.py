"""Run execution domain exports."""

from .run_contracts import (
    EXIT_HARNESS_ERROR,
    EXIT_SUCCESS,
    EXIT_TESTS_FAILED,
    SuiteRunOutcome,
    SuiteRunRequest,
)
from .suite_run_use_case import SuiteIOError, run_test_suite

__all__ = [
    "EXIT_SUCCESS",
    "EXIT_TESTS_FAILED",
    "EXIT_HARNESS_ERROR",
    "SuiteRunRequest",
    "SuiteRunOutcome",
    "SuiteIOError",
    "run_test_suite",
]
