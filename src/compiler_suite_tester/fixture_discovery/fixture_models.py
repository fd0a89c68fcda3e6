"""Fixture discovery entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePosixPath


@dataclass(frozen=True)
class FixturePath:
    """A discovered fixture file and its location relative to the project root."""

    path: Path
    relative_path: PurePosixPath

    @property
    def relative_dir(self) -> PurePosixPath:
        return self.relative_path.parent
