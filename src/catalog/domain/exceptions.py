"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from catalog.domain.validation.error import Error

if TYPE_CHECKING:
    from catalog.domain.validation.notification import Notification


class DomainException(Exception):
    """Base class for all domain errors.

    Carries the ordered list of errors that caused it.  Most exceptions hold
    a single error equal to their message.
    """

    def __init__(self, message: str, errors: list[Error] | None = None) -> None:
        super().__init__(message)
        self.errors: list[Error] = list(errors) if errors else [Error(message)]


class ValidationError(DomainException):
    """One or more business rules or invariants were violated.

    Always reported as a single failure carrying the *full* ordered list of
    errors, never split into several exceptions.
    """

    def __init__(self, message: str, notification: Notification | None = None) -> None:
        errors = notification.errors if notification is not None else None
        super().__init__(message, errors)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    @classmethod
    def for_entity(cls, kind: str, entity_id: object) -> EntityNotFoundError:
        return cls(f"{kind} with ID {entity_id} was not found")
