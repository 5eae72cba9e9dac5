"""Notification — an error-accumulating validation report.

Validation never stops at the first failure: every independent check
appends to a Notification and the caller decides, once all checks ran,
whether the report turns into a single ValidationError.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from catalog.domain.exceptions import ValidationError
from catalog.domain.validation.error import Error

T = TypeVar("T")


class Notification:
    """Ordered, append-only list of errors."""

    def __init__(self, errors: list[Error] | None = None) -> None:
        self._errors: list[Error] = list(errors or [])

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def create(error: Error | None = None) -> Notification:
        """Return an empty report, or one already holding *error*."""
        return Notification([error] if error is not None else None)

    @staticmethod
    def from_exception(exc: BaseException) -> Notification:
        """Wrap an unexpected failure into a single-error report."""
        return Notification.create(Error(str(exc) or type(exc).__name__))

    # --- Accumulation ---------------------------------------------------------

    def append(self, item: Error | Notification) -> Notification:
        """Append one error, or every error of another report in its order."""
        if isinstance(item, Notification):
            self._errors.extend(item.errors)
        else:
            self._errors.append(item)
        return self

    def validate(self, action: Callable[[], T]) -> T | None:
        """Run *action*, recording its validation errors instead of raising.

        Returns the action's result, or None when it raised ValidationError.
        Any other exception propagates.
        """
        try:
            return action()
        except ValidationError as exc:
            self._errors.extend(exc.errors)
            return None

    # --- Queries --------------------------------------------------------------

    @property
    def errors(self) -> list[Error]:
        return list(self._errors)

    def has_error(self) -> bool:
        return bool(self._errors)

    def first_error(self) -> Error | None:
        return self._errors[0] if self._errors else None

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"Notification({[e.message for e in self._errors]!r})"
