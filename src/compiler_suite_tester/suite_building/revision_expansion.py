"""Fan-out of one fixture into one test case per declared revision."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from compiler_suite_tester.fixture_discovery import FixturePath
from compiler_suite_tester.fixture_headers import load_revisions
from compiler_suite_tester.suite_contracts import TestMode

RevisionLister = Callable[[Path], tuple[str, ...]]


def expand_revisions(
    mode: TestMode,
    fixture: FixturePath,
    list_revisions: RevisionLister = load_revisions,
) -> tuple[str | None, ...]:
    """Return the revisions to build for ``fixture``; ``(None,)`` means one plain case.

    Only UI fixtures can declare revisions; other modes never consult the lister.
    """
    if mode is not TestMode.UI:
        return (None,)
    revisions = tuple(list_revisions(fixture.path))
    return revisions if revisions else (None,)
