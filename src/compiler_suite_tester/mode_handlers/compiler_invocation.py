"""Compiler subprocess invocation shared by the mode handlers."""

from __future__ import annotations

import logging
import shlex
import signal
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from compiler_suite_tester.configuration.runtime_settings import TesterConfig

_LOGGER = logging.getLogger(__name__)


class CompilerInvocationError(Exception):
    """Raised when the compiler binary cannot be started."""


@dataclass(frozen=True)
class CompilerRun:
    """Captured result of one compiler invocation."""

    command: tuple[str, ...]
    exit_code: int
    stdout: str
    stderr: str

    @property
    def crashed(self) -> bool:
        """Return True when the process was terminated by a signal."""
        return self.exit_code < 0

    def describe_exit(self) -> str:
        if self.crashed:
            try:
                name = signal.Signals(-self.exit_code).name
            except ValueError:
                name = f"signal {-self.exit_code}"
            return f"terminated by {name}"
        return f"exit code {self.exit_code}"


def run_compiler(
    config: TesterConfig, arguments: Sequence[str], *, cwd: Path | None = None
) -> CompilerRun:
    """Run the compiler under test with ``arguments`` and capture its output."""
    command = (str(config.binary_path), *arguments)
    _LOGGER.debug("running %s", shlex.join(command))
    try:
        completed = subprocess.run(
            list(command),
            cwd=cwd or config.root_dir,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise CompilerInvocationError(
            f"Failed to run compiler: {shlex.join(command)}: {exc}"
        ) from exc
    return CompilerRun(
        command=command,
        exit_code=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )


def normalize_output(text: str, *, config: TesterConfig, fixture_path: Path) -> str:
    """Make compiler output independent of the checkout location."""
    normalized = text.replace("\r\n", "\n")
    for path, placeholder in (
        (fixture_path.parent, "$DIR"),
        (config.root_dir, "$ROOT"),
    ):
        normalized = normalized.replace(str(path), placeholder)
        normalized = normalized.replace(path.as_posix(), placeholder)
    lines = [line.rstrip() for line in normalized.split("\n")]
    while lines and not lines[-1]:
        lines.pop()
    return "\n".join(lines) + "\n" if lines else ""
