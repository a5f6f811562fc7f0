"""Exception hierarchy for fnutils.

Only the library's own failures live here. Exceptions raised by user
computations wrapped in :class:`fnutils.IO` are never re-wrapped.
"""

from __future__ import annotations


class FnUtilsError(Exception):
    """Base exception for all fnutils errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(FnUtilsError):
    """Configuration validation or resolution failed."""
