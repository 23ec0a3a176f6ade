"""
Domain-specific exception hierarchy for Corgi Cover.

All exceptions inherit from CorgiCoverError so callers can catch broadly
or narrowly as needed.  Each exception carries structured context in
``details`` for logging/debugging.
"""

from typing import Optional


class CorgiCoverError(Exception):
    """Base exception for all Corgi Cover errors."""

    def __init__(self, message: str, *, details: Optional[dict] = None) -> None:
        self.details = details or {}
        super().__init__(message)


class InvalidInputError(CorgiCoverError, ValueError):
    """Rule computation called with arguments outside its contract."""
    pass


class MalformedRowError(CorgiCoverError, ValueError):
    """A row of an application table could not be parsed."""

    def __init__(
        self,
        message: str,
        *,
        line_number: Optional[int] = None,
        **kwargs,
    ) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"Line {line_number}: {message}"
        super().__init__(message, **kwargs)


class ExportSourceMissingError(CorgiCoverError, FileNotFoundError):
    """JSON export attempted without an accepted-output stream."""
    pass
