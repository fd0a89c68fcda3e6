"""Builds schedulable test case descriptors from discovered fixtures."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from pathlib import Path, PurePosixPath

from compiler_suite_tester.configuration import TesterConfig
from compiler_suite_tester.fixture_discovery import FixturePath, collect_fixtures
from compiler_suite_tester.fixture_headers import FixtureHeaderError, load_revisions
from compiler_suite_tester.output_layout import ensure_output_directory
from compiler_suite_tester.suite_contracts import (
    ExecutionContext,
    TestCase,
    TestCaseFailed,
    TestMode,
    TestResult,
)
from compiler_suite_tester.test_modes import ModeHandlers, handlers_for

from .revision_expansion import RevisionLister, expand_revisions

_LOGGER = logging.getLogger(__name__)

FAILURE_MESSAGE = "test failed"


def display_name_for(mode: TestMode, fixture: FixturePath, revision: str | None) -> str:
    """Render ``[<mode>] <relative path>[#<revision>]``."""
    revision_suffix = f"#{revision}" if revision is not None else ""
    return f"[{mode.value}] {fixture.relative_path.as_posix()}{revision_suffix}"


def build_mode_cases(
    config: TesterConfig,
    mode: TestMode,
    fixtures: Sequence[FixturePath] | None = None,
    *,
    handlers: ModeHandlers | None = None,
    list_revisions: RevisionLister = load_revisions,
) -> list[TestCase]:
    """Discover (unless ``fixtures`` is given) and describe every case of one mode."""
    resolved_handlers = handlers or handlers_for(mode)
    inputs = (
        fixtures
        if fixtures is not None
        else collect_fixtures(
            config.root_dir,
            Path(resolved_handlers.discovery_root),
            resolved_handlers.extensions,
        )
    )
    cases: list[TestCase] = []
    for fixture in inputs:
        for revision in expand_revisions(mode, fixture, list_revisions):
            cases.append(make_test_case(config, mode, resolved_handlers, fixture, revision))
    _LOGGER.debug("built %d %s cases from %d fixtures", len(cases), mode.value, len(inputs))
    return cases


def make_test_case(
    config: TesterConfig,
    mode: TestMode,
    handlers: ModeHandlers,
    fixture: FixturePath,
    revision: str | None,
) -> TestCase:
    """Describe one (mode, fixture, revision) case without running the compiler."""
    relative_dir = fixture.relative_dir
    if not handlers.uses_structured_headers:
        ensure_output_directory(config, relative_dir)

    check_result = handlers.check(config, fixture.path)
    ignore_reason = check_result.reason if check_result.is_skipped else None
    display_name = display_name_for(mode, fixture, revision)
    if ignore_reason is not None:
        _LOGGER.debug("%s ignored: %s", display_name, ignore_reason)

    return TestCase(
        mode=mode,
        fixture=fixture,
        revision=revision,
        display_name=display_name,
        ignore_reason=ignore_reason,
        run=partial(
            execute_test_case,
            config,
            handlers,
            fixture.path,
            relative_dir,
            revision,
        ),
    )


def execute_test_case(
    config: TesterConfig,
    handlers: ModeHandlers,
    fixture_path: Path,
    relative_dir: PurePosixPath,
    revision: str | None,
) -> TestResult:
    """Load the fixture, run the mode's run function and translate its verdict.

    A ``FAILED`` verdict is raised as :class:`TestCaseFailed` carrying the run
    function's diagnostics; ``PASSED`` and ``SKIPPED`` are returned unchanged.
    """
    try:
        src = fixture_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TestCaseFailed(f"failed to read fixture {fixture_path}: {exc}") from exc
    try:
        props = handlers.load_properties(src, revision)
    except FixtureHeaderError as exc:
        raise TestCaseFailed(f"invalid fixture header in {fixture_path}: {exc}") from exc

    cx = ExecutionContext(
        config=config,
        fixture_path=fixture_path,
        relative_dir=relative_dir,
        src=src,
        props=props,
        revision=revision,
    )
    ensure_output_directory(config, relative_dir)
    result = handlers.run(cx)
    if result is TestResult.FAILED:
        raise TestCaseFailed(FAILURE_MESSAGE, tuple(cx.diagnostics))
    return result
