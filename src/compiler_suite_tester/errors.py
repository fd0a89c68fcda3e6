"""Base error type for fatal harness failures."""


class TesterError(Exception):
    """Raised when the test harness cannot build or run the suite at all."""
