from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class InvalidInterval(ValidationError):
    """Raised when a time span has start >= end or is not minute aligned."""


class InvalidRate(ValidationError):
    """Raised when the hourly rate is negative or not an integer."""


class NotFoundError(DomainError):
    """Raised when a record id does not exist."""


class ComputationInvariantViolation(DomainError):
    """Internal postcondition failure. Indicates an engine bug."""
