"""Test mode domain exports."""

from .mode_catalog import (
    MODE_ENV_VAR,
    ModeHandlers,
    PropertyLoader,
    all_modes,
    handlers_for,
    parse_mode,
    select_active_modes,
)

__all__ = [
    "MODE_ENV_VAR",
    "ModeHandlers",
    "PropertyLoader",
    "all_modes",
    "handlers_for",
    "parse_mode",
    "select_active_modes",
]
