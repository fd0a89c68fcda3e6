"""Fixture discovery domain exports."""

from .fixture_models import FixturePath
from .fixture_walker import DiscoveryError, collect_fixtures, to_fixture_path

__all__ = ["FixturePath", "DiscoveryError", "collect_fixtures", "to_fixture_path"]
