"""User records: the raw intake and its validated, normalized counterpart.

The intake is whatever the caller typed; the validated record is only ever
built by the validator service once every field has passed.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel

from cadastro.core.types import CPF, CPFDigits, RawText

DISPLAY_DATE_FORMAT = "%d/%m/%Y"


class UserInput(BaseModel):
    """Raw personal data as typed by the user, whitespace-trimmed."""

    name: RawText = ""
    email: RawText = ""
    id_number: RawText = ""
    birth_date: RawText = ""

    model_config = {"str_strip_whitespace": True, "frozen": True}


class ValidatedUser(BaseModel):
    """Personal data that passed every rule."""

    name: str
    email: str
    id_number: CPF  # canonical 000.000.000-00
    birth_date: date

    model_config = {"frozen": True}

    @property
    def id_digits(self) -> CPFDigits:
        """The CPF without punctuation."""
        return "".join(ch for ch in self.id_number if ch.isdigit())

    @property
    def formatted_birth_date(self) -> str:
        return self.birth_date.strftime(DISPLAY_DATE_FORMAT)

    def display_lines(self) -> list[str]:
        """Labelled lines for the console report."""
        return [
            f"Nome: {self.name}",
            f"Email: {self.email}",
            f"CPF: {self.id_number}",
            f"Data de Nascimento: {self.formatted_birth_date}",
        ]
