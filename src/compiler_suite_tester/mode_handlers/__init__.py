"""Mode handler exports."""

from .compiler_invocation import (
    CompilerInvocationError,
    CompilerRun,
    normalize_output,
    run_compiler,
)
from .solc_handler import (
    check_solidity_fixture,
    check_yul_fixture,
    expects_rejection,
    run_solc_fixture,
)
from .ui_handler import check_ui_fixture, run_ui_fixture, snapshot_path

__all__ = [
    "CompilerInvocationError",
    "CompilerRun",
    "normalize_output",
    "run_compiler",
    "check_ui_fixture",
    "run_ui_fixture",
    "snapshot_path",
    "check_solidity_fixture",
    "check_yul_fixture",
    "expects_rejection",
    "run_solc_fixture",
]
