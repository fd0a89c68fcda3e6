"""Test case entities shared by the suite builder, mode handlers and executor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from compiler_suite_tester.configuration.runtime_settings import TesterConfig
from compiler_suite_tester.fixture_discovery.fixture_models import FixturePath
from compiler_suite_tester.fixture_headers.header_models import FixtureProperties
from compiler_suite_tester.output_layout.output_directories import output_directory_for


class TestMode(str, Enum):
    """Closed set of suite modes; the value is the tag used in names and overrides."""

    __test__ = False

    UI = "ui"
    SOLC_SOLIDITY = "solc-solidity"
    SOLC_YUL = "solc-yul"


class TestResult(str, Enum):
    """Outcome of a check or run function."""

    __test__ = False

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class CheckResult:
    """Check-time verdict: either run the case or skip it with a reason."""

    result: TestResult
    reason: str | None = None

    @staticmethod
    def not_skipped() -> CheckResult:
        return CheckResult(result=TestResult.PASSED)

    @staticmethod
    def skipped(reason: str) -> CheckResult:
        return CheckResult(result=TestResult.SKIPPED, reason=reason)

    @property
    def is_skipped(self) -> bool:
        return self.result is TestResult.SKIPPED


@dataclass
class ExecutionContext:  # pylint: disable=too-many-instance-attributes
    """Everything a run function needs to execute one test case."""

    config: TesterConfig
    fixture_path: Path
    relative_dir: PurePosixPath
    src: str
    props: FixtureProperties
    revision: str | None
    diagnostics: list[str] = field(default_factory=list)

    @property
    def output_dir(self) -> Path:
        return output_directory_for(self.config, self.relative_dir)

    def note(self, message: str) -> None:
        """Record a diagnostic shown when the case fails."""
        self.diagnostics.append(message)


CheckFunction = Callable[[TesterConfig, Path], CheckResult]
RunFunction = Callable[[ExecutionContext], TestResult]


class TestCaseFailed(Exception):
    """Raised by a run callable when the case's run function reported a failure."""

    __test__ = False

    def __init__(self, message: str, diagnostics: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.diagnostics = diagnostics


@dataclass(frozen=True)
class TestCase:
    """Fully built, ready-to-schedule descriptor of one test case."""

    __test__ = False

    mode: TestMode
    fixture: FixturePath
    revision: str | None
    display_name: str
    ignore_reason: str | None
    run: Callable[[], TestResult] = field(compare=False, repr=False)

    @property
    def ignored(self) -> bool:
        return self.ignore_reason is not None
