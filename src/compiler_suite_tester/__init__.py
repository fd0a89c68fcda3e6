"""Fixture-driven, parallel test-suite orchestrator for a compiler binary."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
