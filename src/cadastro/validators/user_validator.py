"""UserValidatorService — validates the four intake fields as one record."""

from __future__ import annotations

import logging
from datetime import date

from cadastro.clock import FixedClock, SystemClock
from cadastro.core.config import AppSettings
from cadastro.core.protocols import IClock
from cadastro.models.outcome import Outcome
from cadastro.models.user import UserInput, ValidatedUser
from cadastro.validators.birth_date import formats_named, validate_birth_date
from cadastro.validators.cpf import validate_cpf
from cadastro.validators.email import validate_email
from cadastro.validators.name import validate_name

logger = logging.getLogger(__name__)


class UserValidatorService:
    """Runs every field validator and composes their outcomes.

    Fields are checked independently so a bad name never hides a bad email;
    issues come back in field order (name, email, CPF, birth date).
    Settings and the clock are injected at construction time.
    """

    def __init__(self, *, settings: AppSettings, clock: IClock) -> None:
        self._settings = settings
        self._clock = clock
        self._formats = formats_named(settings.validation.date_formats)

    def validate(self, user: UserInput) -> Outcome[ValidatedUser]:
        rules = self._settings.validation
        name = validate_name(user.name, reject_double_spaces=rules.reject_double_spaces)
        email = validate_email(user.email)
        id_number = validate_cpf(user.id_number, strict_format=rules.strict_id_format)
        birth_date = validate_birth_date(
            user.birth_date,
            today=self._clock.today(),
            min_age=rules.min_age,
            max_age=rules.max_age,
            formats=self._formats,
            two_digit_year_pivot=rules.two_digit_year_pivot,
        )

        issues = name.issues + email.issues + id_number.issues + birth_date.issues
        if issues:
            logger.info(
                "user rejected with %d issue(s): %s",
                len(issues),
                ", ".join(issue.kind.value for issue in issues),
            )
            return Outcome[ValidatedUser].failure(*issues)

        logger.info("user accepted")
        return Outcome[ValidatedUser].success(
            ValidatedUser(
                name=name.unwrap(),
                email=email.unwrap(),
                id_number=id_number.unwrap(),
                birth_date=birth_date.unwrap(),
            )
        )


def validate_user(
    name: str,
    email: str,
    id_number: str,
    birth_date: str,
    *,
    settings: AppSettings | None = None,
    today: date | None = None,
) -> Outcome[ValidatedUser]:
    """Validate four raw strings with default wiring.

    ``today`` pins the reference date for the age checks; the system date is
    used when omitted.
    """
    if settings is None:
        settings = AppSettings()
    clock: IClock = FixedClock(today) if today is not None else SystemClock()
    service = UserValidatorService(settings=settings, clock=clock)
    return service.validate(
        UserInput(name=name, email=email, id_number=id_number, birth_date=birth_date)
    )
