"""Cadastro exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from cadastro.models.issues import ValidationIssue


class CadastroError(Exception):
    """Base exception for all Cadastro errors."""


class UserValidationError(CadastroError):
    """One or more personal data fields failed validation."""

    def __init__(self, issues: Sequence[ValidationIssue]) -> None:
        self.issues = tuple(issues)
        summary = "; ".join(issue.message for issue in self.issues)
        super().__init__(f"{len(self.issues)} validation issue(s): {summary}")
