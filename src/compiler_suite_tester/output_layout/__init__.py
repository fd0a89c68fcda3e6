"""Output layout domain exports."""

from .output_directories import (
    OutputDirectoryError,
    ensure_output_directory,
    output_directory_for,
)

__all__ = ["OutputDirectoryError", "ensure_output_directory", "output_directory_for"]
