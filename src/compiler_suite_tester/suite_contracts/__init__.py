"""Test case contract exports."""

from .case_models import (
    CheckFunction,
    CheckResult,
    ExecutionContext,
    RunFunction,
    TestCase,
    TestCaseFailed,
    TestMode,
    TestResult,
)

__all__ = [
    "TestMode",
    "TestResult",
    "CheckResult",
    "ExecutionContext",
    "CheckFunction",
    "RunFunction",
    "TestCase",
    "TestCaseFailed",
]
