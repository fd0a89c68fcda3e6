"""Deterministic fixture tree walker."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path, PurePosixPath

from compiler_suite_tester.errors import TesterError

from .fixture_models import FixturePath

_LOGGER = logging.getLogger(__name__)


class DiscoveryError(TesterError):
    """Raised when the fixture tree cannot be enumerated."""


def collect_fixtures(
    root_dir: Path, mode_root: Path | str, extensions: Sequence[str]
) -> tuple[FixturePath, ...]:
    """Return every fixture under ``root_dir / mode_root`` whose suffix is in ``extensions``.

    Directory entries are visited sorted by file name at every level, so the same
    tree always yields the same ordered result. A missing mode root or an
    unreadable entry aborts discovery.
    """
    start = root_dir / mode_root
    if not start.exists():
        raise DiscoveryError(
            f"Fixture root does not exist: {start} (check the project root or select a mode)"
        )
    if not start.is_dir():
        raise DiscoveryError(f"Fixture root is not a directory: {start}")

    allowed = frozenset(extensions)
    fixtures = tuple(
        to_fixture_path(root_dir, path)
        for path in _walk_sorted(start)
        if path.suffix in allowed
    )
    _LOGGER.debug("collected %d fixtures under %s", len(fixtures), start)
    return fixtures


def to_fixture_path(root_dir: Path, path: Path) -> FixturePath:
    """Pair ``path`` with its location relative to ``root_dir``."""
    try:
        relative = path.relative_to(root_dir)
    except ValueError as exc:
        raise DiscoveryError(f"Fixture {path} is not under project root {root_dir}") from exc
    relative_path = PurePosixPath(relative.as_posix())
    if relative_path.name == "" or relative_path == PurePosixPath("."):
        raise DiscoveryError(f"Fixture {path} has no parent directory below the root")
    return FixturePath(path=path, relative_path=relative_path)


def _walk_sorted(directory: Path) -> Iterator[Path]:
    try:
        with os.scandir(directory) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)
    except OSError as exc:
        raise DiscoveryError(f"Failed to read fixture directory {directory}: {exc}") from exc

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=True)
            is_file = not is_dir and entry.is_file(follow_symlinks=True)
        except OSError as exc:
            raise DiscoveryError(f"Failed to inspect fixture entry {entry.path}: {exc}") from exc
        if is_dir:
            yield from _walk_sorted(Path(entry.path))
        elif is_file:
            yield Path(entry.path)
