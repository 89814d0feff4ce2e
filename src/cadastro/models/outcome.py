"""Outcome: either a validated value or the issues that prevented it."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, model_validator

from cadastro.core.exceptions import UserValidationError
from cadastro.models.issues import ErrorKind, ValidationIssue

T = TypeVar("T")


class Outcome(BaseModel, Generic[T]):
    """Result of a validation call.

    Exactly one side is populated: ``value`` on success, a non-empty
    ``issues`` tuple on failure. Callers compose outcomes instead of
    appending to a shared error list.
    """

    model_config = {"frozen": True}

    value: Optional[T] = None
    issues: tuple[ValidationIssue, ...] = ()

    @model_validator(mode="after")
    def _one_side(self) -> Outcome[T]:
        if self.issues and self.value is not None:
            raise ValueError("an outcome cannot carry both a value and issues")
        if not self.issues and self.value is None:
            raise ValueError("a successful outcome needs a value")
        return self

    @classmethod
    def success(cls, value: T) -> Outcome[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, *issues: ValidationIssue) -> Outcome[T]:
        return cls(issues=issues)

    @property
    def ok(self) -> bool:
        return not self.issues

    @property
    def messages(self) -> list[str]:
        return [issue.message for issue in self.issues]

    @property
    def kinds(self) -> list[ErrorKind]:
        return [issue.kind for issue in self.issues]

    def unwrap(self) -> T:
        """Return the value or raise UserValidationError with the issues."""
        if self.issues:
            raise UserValidationError(self.issues)
        return self.value  # type: ignore[return-value]
