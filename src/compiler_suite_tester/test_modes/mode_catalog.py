"""Closed mapping from test mode to discovery and handler settings."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath

from compiler_suite_tester.configuration import ConfigurationError
from compiler_suite_tester.fixture_headers import (
    FixtureProperties,
    load_properties,
    load_solc_properties,
)
from compiler_suite_tester.mode_handlers import (
    check_solidity_fixture,
    check_ui_fixture,
    check_yul_fixture,
    run_solc_fixture,
    run_ui_fixture,
)
from compiler_suite_tester.suite_contracts import CheckFunction, RunFunction, TestMode

MODE_ENV_VAR = "TESTER_MODE"

PropertyLoader = Callable[[str, str | None], FixtureProperties]


@dataclass(frozen=True)
class ModeHandlers:
    """Discovery root, extension filter and check/run pair for one mode."""

    discovery_root: PurePosixPath
    extensions: tuple[str, ...]
    check: CheckFunction
    run: RunFunction
    uses_structured_headers: bool

    @property
    def load_properties(self) -> PropertyLoader:
        return load_solc_properties if self.uses_structured_headers else load_properties


_MODE_HANDLERS: Mapping[TestMode, ModeHandlers] = {
    TestMode.UI: ModeHandlers(
        discovery_root=PurePosixPath("tests/ui"),
        extensions=(".sol", ".yul"),
        check=check_ui_fixture,
        run=run_ui_fixture,
        uses_structured_headers=False,
    ),
    TestMode.SOLC_SOLIDITY: ModeHandlers(
        discovery_root=PurePosixPath("testdata/solidity/test"),
        extensions=(".sol",),
        check=check_solidity_fixture,
        run=run_solc_fixture,
        uses_structured_headers=True,
    ),
    TestMode.SOLC_YUL: ModeHandlers(
        discovery_root=PurePosixPath("testdata/solidity/test/libyul"),
        extensions=(".yul", ".sol"),
        check=check_yul_fixture,
        run=run_solc_fixture,
        uses_structured_headers=True,
    ),
}


def handlers_for(mode: TestMode) -> ModeHandlers:
    """Return the handler set registered for ``mode``."""
    return _MODE_HANDLERS[mode]


def all_modes() -> tuple[TestMode, ...]:
    return tuple(TestMode)


def parse_mode(tag: str) -> TestMode:
    """Translate a mode tag such as ``solc-yul`` into a :class:`TestMode`."""
    try:
        return TestMode(tag)
    except ValueError as exc:
        known = ", ".join(mode.value for mode in TestMode)
        raise ConfigurationError(f"unknown mode: {tag} (expected one of: {known})") from exc


def select_active_modes(
    environ: Mapping[str, str] | None = None, *, override: str | None = None
) -> tuple[TestMode, ...]:
    """Return the modes to run: the single overridden mode, or all of them."""
    env = os.environ if environ is None else environ
    tag = override if override is not None else env.get(MODE_ENV_VAR)
    if tag is None:
        return all_modes()
    return (parse_mode(tag),)
