"""Configuration domain exports."""

from .loader import (
    BLESS_ENV_VAR,
    ConfigurationError,
    load_tester_config,
    parse_bless_flag,
    resolve_project_root,
)
from .runtime_settings import TesterConfig

__all__ = [
    "TesterConfig",
    "ConfigurationError",
    "BLESS_ENV_VAR",
    "load_tester_config",
    "parse_bless_flag",
    "resolve_project_root",
]
