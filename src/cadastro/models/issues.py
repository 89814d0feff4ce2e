"""Validation issue models and the pt-BR message catalogue."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


class FieldName(str, Enum):
    """Input fields, in reporting order."""

    NAME = "name"
    EMAIL = "email"
    ID_NUMBER = "id_number"
    BIRTH_DATE = "birth_date"


class ErrorKind(str, Enum):
    """One kind per validation rule."""

    BLANK_NAME = "blank_name"
    INVALID_NAME = "invalid_name"
    BLANK_EMAIL = "blank_email"
    INVALID_EMAIL = "invalid_email"
    BLANK_ID = "blank_id"
    INVALID_ID = "invalid_id"
    BLANK_DATE = "blank_date"
    INVALID_DATE_FORMAT = "invalid_date_format"
    NONEXISTENT_DATE = "nonexistent_date"
    UNDERAGE = "underage"
    TOO_OLD = "too_old"


MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.BLANK_NAME: "Nome está em branco.",
    ErrorKind.INVALID_NAME: (
        "Nome inválido. Por favor, digite um nome contendo apenas letras e espaços simples."
    ),
    ErrorKind.BLANK_EMAIL: "Email está em branco.",
    ErrorKind.INVALID_EMAIL: (
        "Email inválido. O email deve seguir um formato válido, como 'nathan@email.com'."
    ),
    ErrorKind.BLANK_ID: "CPF está em branco.",
    ErrorKind.INVALID_ID: "CPF inválido. Por favor, digite um CPF válido.",
    ErrorKind.BLANK_DATE: "Data de nascimento está em branco.",
    ErrorKind.INVALID_DATE_FORMAT: "Formato de data inválido. Use o formato {formats}.",
    ErrorKind.NONEXISTENT_DATE: "Data inexistente. Por favor, insira uma data válida.",
    ErrorKind.UNDERAGE: "Você deve ter {min_age} anos ou mais para continuar.",
    ErrorKind.TOO_OLD: (
        "Data de nascimento inválida. Por favor, insira uma data de até {max_age} anos atrás."
    ),
}


def render_message(kind: ErrorKind, **context: Any) -> str:
    """Fill the catalogue template for ``kind`` with ``context``."""
    return MESSAGES[kind].format(**context)


class ValidationIssue(BaseModel):
    """A single failed rule for a single field."""

    model_config = {"frozen": True}

    field: FieldName
    kind: ErrorKind
    message: str

    @classmethod
    def of(cls, field: FieldName, kind: ErrorKind, **context: Any) -> ValidationIssue:
        return cls(field=field, kind=kind, message=render_message(kind, **context))

    def __str__(self) -> str:
        return self.message
