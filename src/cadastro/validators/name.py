"""Name validation: ASCII letters separated by single spaces."""

from __future__ import annotations

import logging
import re

from cadastro.models.issues import ErrorKind, FieldName, ValidationIssue
from cadastro.models.outcome import Outcome

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"[A-Za-z ]+")


def validate_name(name: str, *, reject_double_spaces: bool = True) -> Outcome[str]:
    """Check a trimmed name; the accepted value is returned unchanged."""
    if not name:
        return _reject(ErrorKind.BLANK_NAME)
    if not NAME_PATTERN.fullmatch(name):
        return _reject(ErrorKind.INVALID_NAME)
    if reject_double_spaces and "  " in name:
        return _reject(ErrorKind.INVALID_NAME)
    return Outcome[str].success(name)


def _reject(kind: ErrorKind) -> Outcome[str]:
    logger.debug("name rejected: %s", kind.value)
    return Outcome[str].failure(ValidationIssue.of(FieldName.NAME, kind))
