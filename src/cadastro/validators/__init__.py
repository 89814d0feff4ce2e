"""Field validators and the record-level validator service."""

from __future__ import annotations

from cadastro.validators.birth_date import validate_birth_date
from cadastro.validators.cpf import format_cpf, is_valid_cpf, validate_cpf
from cadastro.validators.email import validate_email
from cadastro.validators.name import validate_name
from cadastro.validators.user_validator import UserValidatorService, validate_user

__all__ = [
    "UserValidatorService",
    "format_cpf",
    "is_valid_cpf",
    "validate_birth_date",
    "validate_cpf",
    "validate_email",
    "validate_name",
    "validate_user",
]
