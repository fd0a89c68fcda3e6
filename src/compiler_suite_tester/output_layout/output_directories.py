"""Per-fixture output artifact directories."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from compiler_suite_tester.configuration.runtime_settings import TesterConfig
from compiler_suite_tester.errors import TesterError


class OutputDirectoryError(TesterError):
    """Raised when an artifact directory cannot be created."""


def output_directory_for(config: TesterConfig, relative_dir: PurePosixPath | str) -> Path:
    """Mirror the fixture's relative directory under the output base directory."""
    relative = PurePosixPath(relative_dir)
    if relative.is_absolute() or ".." in relative.parts:
        raise OutputDirectoryError(f"Fixture directory escapes the output tree: {relative}")
    return config.output_base_dir.joinpath(*relative.parts)


def ensure_output_directory(config: TesterConfig, relative_dir: PurePosixPath | str) -> Path:
    """Create the artifact directory if missing; repeated and concurrent calls are no-ops."""
    directory = output_directory_for(config, relative_dir)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputDirectoryError(
            f"Failed to create output directory {directory}: {exc}"
        ) from exc
    return directory
