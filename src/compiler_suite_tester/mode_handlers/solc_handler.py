"""Check and run functions for the Solidity and Yul conformance modes."""

from __future__ import annotations

from pathlib import Path

from compiler_suite_tester.configuration.runtime_settings import TesterConfig
from compiler_suite_tester.fixture_headers import FixtureHeaderError
from compiler_suite_tester.suite_contracts import CheckResult, ExecutionContext, TestResult

from .compiler_invocation import CompilerInvocationError, run_compiler

UNSUPPORTED_DIRECTORIES = frozenset({"cmdlineTests", "externalTests", "lsp", "evmc"})
EXTERNAL_SOURCE_MARKER = "==== ExternalSource:"
REJECTING_ERROR_KINDS = frozenset({"ParserError", "SyntaxError"})


def check_solidity_fixture(config: TesterConfig, path: Path) -> CheckResult:
    return _check_conformance_fixture(config, path)


def check_yul_fixture(config: TesterConfig, path: Path) -> CheckResult:
    return _check_conformance_fixture(config, path)


def _check_conformance_fixture(config: TesterConfig, path: Path) -> CheckResult:
    try:
        relative_parts = path.relative_to(config.root_dir).parts
    except ValueError:
        relative_parts = path.parts
    for part in relative_parts[:-1]:
        if part in UNSUPPORTED_DIRECTORIES:
            return CheckResult.skipped(f"unsupported test directory '{part}'")

    try:
        src = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FixtureHeaderError(f"Failed to read fixture {path}: {exc}") from exc
    if EXTERNAL_SOURCE_MARKER in src:
        return CheckResult.skipped("imports external sources")
    return CheckResult.not_skipped()


def expects_rejection(expectations: tuple[str, ...]) -> bool:
    """Return True when the expected output names a parse-level error."""
    return any(
        line.split(maxsplit=1)[0] in REJECTING_ERROR_KINDS for line in expectations if line
    )


def run_solc_fixture(cx: ExecutionContext) -> TestResult:
    """Pass when the compiler accepts or rejects the fixture as the corpus expects."""
    try:
        compiler_run = run_compiler(cx.config, (str(cx.fixture_path),))
    except CompilerInvocationError as exc:
        cx.note(str(exc))
        return TestResult.FAILED

    if compiler_run.crashed:
        cx.note(f"compiler {compiler_run.describe_exit()}")
        cx.note(compiler_run.stderr)
        return TestResult.FAILED

    should_reject = expects_rejection(cx.props.expectations)
    rejected = compiler_run.exit_code != 0
    if should_reject == rejected:
        return TestResult.PASSED

    if should_reject:
        cx.note("expected the compiler to reject the fixture, but it was accepted")
        cx.note("expected output:\n" + "\n".join(cx.props.expectations))
    else:
        cx.note(f"unexpected compiler failure ({compiler_run.describe_exit()}):")
        cx.note(compiler_run.stderr)
    return TestResult.FAILED
