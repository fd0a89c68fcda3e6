"""Suite building domain exports."""

from .descriptor_builder import (
    build_mode_cases,
    display_name_for,
    execute_test_case,
    make_test_case,
)
from .revision_expansion import RevisionLister, expand_revisions
from .suite_assembly import DuplicateTestNameError, assemble_suite, sort_suite

__all__ = [
    "RevisionLister",
    "expand_revisions",
    "build_mode_cases",
    "display_name_for",
    "execute_test_case",
    "make_test_case",
    "DuplicateTestNameError",
    "assemble_suite",
    "sort_suite",
]
