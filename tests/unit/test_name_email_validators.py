"""Tests for the name and email validators."""

from __future__ import annotations

import pytest

from cadastro.models.issues import ErrorKind, FieldName
from cadastro.validators.email import is_email_shaped, validate_email
from cadastro.validators.name import validate_name


class TestValidateName:
    def test_accepts_letters_and_spaces_unchanged(self):
        outcome = validate_name("Nathan Almeida")
        assert outcome.ok
        assert outcome.value == "Nathan Almeida"

    def test_blank_name(self):
        outcome = validate_name("")
        assert outcome.kinds == [ErrorKind.BLANK_NAME]
        assert outcome.issues[0].field is FieldName.NAME
        assert outcome.messages == ["Nome está em branco."]

    @pytest.mark.parametrize("name", ["Nathan2", "João Silva", "Ana-Maria", "O'Neil", "Ana\tLima"])
    def test_rejects_characters_outside_ascii_letters(self, name):
        assert validate_name(name).kinds == [ErrorKind.INVALID_NAME]

    def test_double_space_rejected_by_default(self):
        assert validate_name("Nathan  Almeida").kinds == [ErrorKind.INVALID_NAME]

    def test_double_space_allowed_when_lenient(self):
        outcome = validate_name("Nathan  Almeida", reject_double_spaces=False)
        assert outcome.value == "Nathan  Almeida"


class TestValidateEmail:
    @pytest.mark.parametrize(
        "email",
        [
            "nathan@email.com",
            "nathan.almeida@example.com",
            "N.A+tag_1%x-y@Sub-Domain.Example.COM.BR",
            "a@b.museum",
        ],
    )
    def test_accepts_general_shape(self, email):
        outcome = validate_email(email)
        assert outcome.ok
        assert outcome.value == email

    def test_blank_email(self):
        outcome = validate_email("")
        assert outcome.kinds == [ErrorKind.BLANK_EMAIL]
        assert outcome.issues[0].field is FieldName.EMAIL

    @pytest.mark.parametrize(
        "email",
        [
            "nathan@email",
            "nathan@.c",
            "nathan.email.com",
            "nathan@email.c",
            "nathan@email.toolong",
            "nathan@email.com ",
            "na than@email.com",
            "nathan@email.c0m",
            "náthan@email.com",
        ],
    )
    def test_rejects_malformed(self, email):
        assert validate_email(email).kinds == [ErrorKind.INVALID_EMAIL]

    def test_match_is_anchored(self):
        assert not is_email_shaped("x nathan@email.com")
        assert not is_email_shaped("nathan@email.com!")
