"""Email validation against a general local@domain.tld shape."""

from __future__ import annotations

import logging
import re

from cadastro.models.issues import ErrorKind, FieldName, ValidationIssue
from cadastro.models.outcome import Outcome

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,6}", re.IGNORECASE | re.ASCII)


def is_email_shaped(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_email(email: str) -> Outcome[str]:
    if not email:
        kind = ErrorKind.BLANK_EMAIL
    elif not is_email_shaped(email):
        kind = ErrorKind.INVALID_EMAIL
    else:
        return Outcome[str].success(email)
    logger.debug("email rejected: %s", kind.value)
    return Outcome[str].failure(ValidationIssue.of(FieldName.EMAIL, kind))
