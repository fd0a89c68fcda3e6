"""Fixture header domain exports."""

from .directive_parser import (
    load_properties,
    load_revisions,
    parse_revisions,
    unscoped_ignore_reason,
)
from .header_models import FixtureHeaderError, FixtureProperties
from .solc_header_parser import load_solc_properties

__all__ = [
    "FixtureHeaderError",
    "FixtureProperties",
    "load_properties",
    "load_revisions",
    "parse_revisions",
    "unscoped_ignore_reason",
    "load_solc_properties",
]
