"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TesterConfig:
    """Process-wide settings shared read-only by every test case."""

    __test__ = False

    binary_path: Path
    root_dir: Path
    output_base_dir: Path
    bless: bool
    verbose: bool = False
