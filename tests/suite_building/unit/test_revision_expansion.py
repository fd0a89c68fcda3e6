"""Revision expander tests."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from compiler_suite_tester.fixture_discovery import FixturePath
from compiler_suite_tester.suite_building import expand_revisions
from compiler_suite_tester.suite_contracts import TestMode

FIXTURE = FixturePath(path=Path("/root/a/c.sol"), relative_path=PurePosixPath("a/c.sol"))


def test_ui_fixture_with_revisions_expands_in_declared_order() -> None:
    assert expand_revisions(TestMode.UI, FIXTURE, lambda _: ("legacy", "default")) == (
        "legacy",
        "default",
    )


def test_ui_fixture_without_revisions_expands_to_one_plain_case() -> None:
    assert expand_revisions(TestMode.UI, FIXTURE, lambda _: ()) == (None,)


def test_conformance_modes_never_consult_the_revision_lister() -> None:
    calls: list[Path] = []

    def _lister(path: Path) -> tuple[str, ...]:
        calls.append(path)
        return ("legacy",)

    assert expand_revisions(TestMode.SOLC_SOLIDITY, FIXTURE, _lister) == (None,)
    assert expand_revisions(TestMode.SOLC_YUL, FIXTURE, _lister) == (None,)
    assert calls == []
