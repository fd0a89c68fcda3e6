"""Merges the cases of every active mode into one deterministic suite."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from compiler_suite_tester.configuration import TesterConfig
from compiler_suite_tester.errors import TesterError
from compiler_suite_tester.suite_contracts import TestCase, TestMode

from .descriptor_builder import build_mode_cases


class DuplicateTestNameError(TesterError):
    """Raised when two cases would be reported under the same name."""


def assemble_suite(config: TesterConfig, modes: Sequence[TestMode]) -> tuple[TestCase, ...]:
    """Build every case of ``modes`` and return them sorted by display name."""
    cases: list[TestCase] = []
    for mode in modes:
        cases.extend(build_mode_cases(config, mode))
    return sort_suite(cases)


def sort_suite(cases: Iterable[TestCase]) -> tuple[TestCase, ...]:
    """Sort by the UTF-8 bytes of the display name, rejecting duplicate names."""
    ordered = tuple(sorted(cases, key=lambda case: case.display_name.encode("utf-8")))
    duplicates = sorted(
        name for name, count in Counter(case.display_name for case in ordered).items() if count > 1
    )
    if duplicates:
        raise DuplicateTestNameError(f"Duplicate test names: {', '.join(duplicates)}")
    return ordered
