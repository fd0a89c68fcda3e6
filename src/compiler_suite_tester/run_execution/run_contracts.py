"""Run execution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from compiler_suite_tester.test_execution import RunnerOptions, SuiteSummary

EXIT_SUCCESS = 0
EXIT_TESTS_FAILED = 1
EXIT_HARNESS_ERROR = 101


@dataclass(frozen=True)
class SuiteRunRequest:
    """Input contract for one suite run."""

    binary_path: Path | str
    root_dir: Path | str | None = None
    options: RunnerOptions = field(default_factory=RunnerOptions)
    mode_override: str | None = None
    bless: bool = False
    verbose: bool = False
    environ: Mapping[str, str] | None = None


@dataclass(frozen=True)
class SuiteRunOutcome:
    """Output contract for one completed suite run."""

    case_count: int
    summary: SuiteSummary | None

    @property
    def exit_code(self) -> int:
        if self.summary is None or self.summary.passed:
            return EXIT_SUCCESS
        return EXIT_TESTS_FAILED
