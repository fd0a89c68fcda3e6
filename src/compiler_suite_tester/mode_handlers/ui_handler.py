"""Check and run functions for the UI snapshot mode."""

from __future__ import annotations

import difflib
import logging
from pathlib import Path

from compiler_suite_tester.configuration.runtime_settings import TesterConfig
from compiler_suite_tester.fixture_headers import FixtureHeaderError, unscoped_ignore_reason
from compiler_suite_tester.suite_contracts import CheckResult, ExecutionContext, TestResult

from .compiler_invocation import CompilerInvocationError, normalize_output, run_compiler

_LOGGER = logging.getLogger(__name__)

DEFAULT_EXPECTED_EXIT_CODE = 0
SNAPSHOT_SUFFIX = ".stderr"


def check_ui_fixture(config: TesterConfig, path: Path) -> CheckResult:
    """Skip fixtures carrying an unscoped ``ignore-test`` directive."""
    del config
    try:
        src = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureHeaderError(f"Failed to read fixture {path}: {exc}") from exc
    reason = unscoped_ignore_reason(src)
    return CheckResult.skipped(reason) if reason is not None else CheckResult.not_skipped()


def run_ui_fixture(cx: ExecutionContext) -> TestResult:
    """Compile the fixture and compare exit code and stderr against the snapshot."""
    if cx.props.ignore_reason is not None:
        _LOGGER.info(
            "%s revision %s skipped: %s", cx.fixture_path, cx.revision, cx.props.ignore_reason
        )
        return TestResult.SKIPPED
    try:
        compiler_run = run_compiler(cx.config, (*cx.props.compile_flags, str(cx.fixture_path)))
    except CompilerInvocationError as exc:
        cx.note(str(exc))
        return TestResult.FAILED

    stem = artifact_stem(cx.fixture_path, cx.revision)
    output_dir = cx.output_dir
    (output_dir / f"{stem}.stdout").write_text(compiler_run.stdout, encoding="utf-8")
    (output_dir / f"{stem}.stderr").write_text(compiler_run.stderr, encoding="utf-8")

    if compiler_run.crashed:
        cx.note(f"compiler {compiler_run.describe_exit()}")
        cx.note(compiler_run.stderr)
        return TestResult.FAILED

    passed = True
    expected_exit_code = (
        cx.props.expected_exit_code
        if cx.props.expected_exit_code is not None
        else DEFAULT_EXPECTED_EXIT_CODE
    )
    if compiler_run.exit_code != expected_exit_code:
        cx.note(f"expected exit code {expected_exit_code}, got {compiler_run.exit_code}")
        passed = False

    actual = normalize_output(
        compiler_run.stderr, config=cx.config, fixture_path=cx.fixture_path
    )
    snapshot = snapshot_path(cx.fixture_path, cx.revision)
    if not _compare_snapshot(cx, snapshot, actual):
        passed = False
    return TestResult.PASSED if passed else TestResult.FAILED


def artifact_stem(fixture_path: Path, revision: str | None) -> str:
    """Keep the extension so ``a.sol`` and ``a.yul`` in one directory never share artifacts."""
    return f"{fixture_path.name}.{revision}" if revision else fixture_path.name


def snapshot_path(fixture_path: Path, revision: str | None) -> Path:
    """Expected stderr lives beside the fixture: ``<file name>[.<revision>].stderr``."""
    return fixture_path.with_name(artifact_stem(fixture_path, revision) + SNAPSHOT_SUFFIX)


def _compare_snapshot(cx: ExecutionContext, snapshot: Path, actual: str) -> bool:
    expected = snapshot.read_text(encoding="utf-8") if snapshot.exists() else ""
    if expected == actual:
        return True
    if cx.config.bless:
        if actual:
            snapshot.write_text(actual, encoding="utf-8")
        else:
            snapshot.unlink(missing_ok=True)
        return True
    diff = difflib.unified_diff(
        expected.splitlines(keepends=True),
        actual.splitlines(keepends=True),
        fromfile=f"expected {snapshot.name}",
        tofile="actual stderr",
    )
    cx.note("stderr does not match the snapshot (run with TESTER_BLESS=1 to update):")
    cx.note("".join(diff))
    return False
