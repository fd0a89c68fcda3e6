"""Fixture header entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from compiler_suite_tester.errors import TesterError


class FixtureHeaderError(TesterError):
    """Raised when a fixture header cannot be interpreted."""


@dataclass(frozen=True)
class FixtureProperties:
    """Directives loaded from one fixture for one (optional) revision."""

    revisions: tuple[str, ...] = ()
    compile_flags: tuple[str, ...] = ()
    expected_exit_code: int | None = None
    ignore_reason: str | None = None
    settings: Mapping[str, object] = field(default_factory=dict)
    expectations: tuple[str, ...] = ()
