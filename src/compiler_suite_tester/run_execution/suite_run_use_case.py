"""Suite run use-case service."""

from __future__ import annotations

import logging
from typing import IO

from compiler_suite_tester.configuration import load_tester_config
from compiler_suite_tester.errors import TesterError
from compiler_suite_tester.suite_building import assemble_suite
from compiler_suite_tester.test_execution import ConsoleReporter, execute_suite, select_cases
from compiler_suite_tester.test_modes import select_active_modes

from .run_contracts import SuiteRunOutcome, SuiteRunRequest

_LOGGER = logging.getLogger(__name__)


class SuiteIOError(TesterError):
    """Raised when results cannot be written while the suite runs."""


def run_test_suite(request: SuiteRunRequest, *, stream: IO[str] | None = None) -> SuiteRunOutcome:
    """Build the whole suite, then execute it and report to the console.

    Harness errors (configuration, discovery, headers, output directories)
    propagate as :class:`TesterError` before any case executes.
    """
    modes = select_active_modes(request.environ, override=request.mode_override)
    config = load_tester_config(
        request.binary_path,
        root_dir=request.root_dir,
        environ=request.environ,
        bless=request.bless,
        verbose=request.verbose,
    )
    _LOGGER.debug("root=%s modes=%s bless=%s", config.root_dir, modes, config.bless)

    cases = assemble_suite(config, modes)
    reporter = ConsoleReporter(request.options.output_format, stream=stream)
    try:
        if request.options.list_only:
            reporter.list_cases(select_cases(cases, request.options))
            return SuiteRunOutcome(case_count=len(cases), summary=None)
        summary = execute_suite(cases, request.options, reporter)
    except OSError as exc:
        raise SuiteIOError(f"I/O failure during tests: {exc}") from exc
    return SuiteRunOutcome(case_count=len(cases), summary=summary)
