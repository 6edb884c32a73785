"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP and CLI layers can map them uniformly to status codes and
user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated by the input."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MissingRequiredFieldError(ValidationError):
    """A required field was null, empty or whitespace only."""


class InvalidValueError(ValidationError):
    """A field carried a value outside its allowed range."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity_id: int) -> None:
        super().__init__(f"No entity for id {entity_id}")
        self.entity_id = entity_id


class StoreError(DomainException):
    """The underlying store failed in a way not otherwise classified."""
