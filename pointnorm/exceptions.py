"""
Exceptions raised by pointnorm.

All exceptions inherit from PointNormError for easy catching.
"""

from __future__ import annotations


class PointNormError(Exception):
    """Base exception for all pointnorm errors."""

    pass


class SourceUnavailableError(PointNormError):
    """Raised when the coordinate source cannot be opened or read."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class EmptyInputError(PointNormError):
    """Raised when an operation is asked to work on zero elements."""

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation
