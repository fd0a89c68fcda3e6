"""Test execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    """Console output formats."""

    TERSE = "terse"
    PRETTY = "pretty"
    JSON = "json"


class CaseStatus(str, Enum):
    """Reported status of one scheduled case."""

    OK = "ok"
    FAILED = "failed"
    IGNORED = "ignored"


@dataclass(frozen=True)
class RunnerOptions:  # pylint: disable=too-many-instance-attributes
    """Operator-selected runner behaviour."""

    filters: tuple[str, ...] = ()
    skip: tuple[str, ...] = ()
    exact: bool = False
    ignored: bool = False
    include_ignored: bool = False
    test_threads: int | None = None
    output_format: OutputFormat = OutputFormat.TERSE
    list_only: bool = False


@dataclass(frozen=True)
class CaseReport:
    """Outcome of one case as seen by the reporter."""

    name: str
    status: CaseStatus
    message: str | None = None
    diagnostics: tuple[str, ...] = ()
    duration_seconds: float = 0.0


@dataclass(frozen=True)
class SuiteSummary:
    """Aggregated outcome of one suite run."""

    reports: tuple[CaseReport, ...] = ()
    filtered_out: int = 0
    duration_seconds: float = 0.0

    @property
    def failures(self) -> tuple[CaseReport, ...]:
        """Failed reports in display-name order."""
        return tuple(
            sorted(
                (report for report in self.reports if report.status is CaseStatus.FAILED),
                key=lambda report: report.name.encode("utf-8"),
            )
        )

    def count(self, status: CaseStatus) -> int:
        return sum(1 for report in self.reports if report.status is status)

    @property
    def passed(self) -> bool:
        return not self.failures
