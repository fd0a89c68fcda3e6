"""Configuration loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from compiler_suite_tester.errors import TesterError

from .runtime_settings import TesterConfig

BLESS_ENV_VAR = "TESTER_BLESS"
OUTPUT_BASE_RELATIVE_DIR = Path("target") / "tester"
PROJECT_ROOT_MARKERS: tuple[Path, ...] = (
    Path("tests") / "ui",
    Path("testdata") / "solidity",
)


class ConfigurationError(TesterError):
    """Raised when the harness itself is misconfigured."""


def load_tester_config(
    binary_path: Path | str,
    *,
    root_dir: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
    anchor: Path | None = None,
    bless: bool | None = None,
    verbose: bool = False,
) -> TesterConfig:
    """Build the immutable run configuration and create the output base directory."""
    env = os.environ if environ is None else environ
    binary = Path(binary_path).resolve()
    if not binary.is_file():
        raise ConfigurationError(f"Compiler binary not found: {binary}")

    root = (
        Path(root_dir).resolve()
        if root_dir is not None
        else resolve_project_root(anchor or Path.cwd())
    )
    if not root.is_dir():
        raise ConfigurationError(f"Project root is not a directory: {root}")

    output_base_dir = root / OUTPUT_BASE_RELATIVE_DIR
    try:
        output_base_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigurationError(
            f"Failed to create output directory {output_base_dir}: {exc}"
        ) from exc

    return TesterConfig(
        binary_path=binary,
        root_dir=root,
        output_base_dir=output_base_dir,
        bless=True if bless else parse_bless_flag(env),
        verbose=verbose,
    )


def parse_bless_flag(environ: Mapping[str, str]) -> bool:
    """Return True when the bless variable is present and not the literal "0"."""
    value = environ.get(BLESS_ENV_VAR)
    return value is not None and value != "0"


def resolve_project_root(anchor: Path) -> Path:
    """Walk up from ``anchor`` to the first directory holding a fixture tree."""
    start = anchor.resolve()
    if start.is_file():
        start = start.parent
    for candidate in (start, *start.parents):
        if any((candidate / marker).is_dir() for marker in PROJECT_ROOT_MARKERS):
            return candidate
    markers = ", ".join(marker.as_posix() for marker in PROJECT_ROOT_MARKERS)
    raise ConfigurationError(f"No project root with any of [{markers}] above {start}")
