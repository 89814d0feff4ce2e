"""CPF validation for Brazil's Cadastro de Pessoas Físicas number.

Eleven digits; the last two are check digits computed with a weighted
modulo-11 sum over the preceding digits:

    first  = 11 - (sum(d[i] * (10 - i) for i in 0..8) % 11)
    second = 11 - ((sum(d[i] * (11 - i) for i in 0..8) + 2 * first) % 11)

with any result of 10 or 11 replaced by 0. Series of a single repeated digit
(000.000.000-00, 111.111.111-11, ...) satisfy the arithmetic but are not
issued and are rejected up front.
"""

from __future__ import annotations

import logging
import re

from cadastro.core.types import CPF, CPFDigits
from cadastro.models.issues import ErrorKind, FieldName, ValidationIssue
from cadastro.models.outcome import Outcome

logger = logging.getLogger(__name__)

CPF_LENGTH = 11
NON_DIGITS = re.compile(r"\D", re.ASCII)
STRICT_CPF_PATTERN = re.compile(r"\d{11}|(?:\d{3}\.){2}\d{3}-\d{2}", re.ASCII)


def strip_non_digits(text: str) -> str:
    return NON_DIGITS.sub("", text)


def _check_digit(weighted_sum: int) -> int:
    digit = 11 - (weighted_sum % 11)
    return 0 if digit >= 10 else digit


def check_digits(base: str) -> tuple[int, int]:
    """Compute both check digits for the first nine digits of a CPF."""
    if len(base) != 9 or not (base.isascii() and base.isdigit()):
        raise ValueError(f"expected 9 digits, got {len(base)} characters")
    digits = [int(ch) for ch in base]
    first = _check_digit(sum(d * (10 - i) for i, d in enumerate(digits)))
    second = _check_digit(sum(d * (11 - i) for i, d in enumerate(digits)) + 2 * first)
    return first, second


def is_valid_cpf(text: str) -> bool:
    """True when ``text`` (punctuation ignored) is a checksum-valid CPF."""
    digits = strip_non_digits(text)
    if len(digits) != CPF_LENGTH:
        return False
    if digits == digits[0] * CPF_LENGTH:
        return False
    first, second = check_digits(digits[:9])
    return int(digits[9]) == first and int(digits[10]) == second


def format_cpf(digits: CPFDigits) -> CPF:
    """Render 11 digits as 000.000.000-00."""
    digits = strip_non_digits(digits)
    if len(digits) != CPF_LENGTH:
        raise ValueError(f"a CPF has {CPF_LENGTH} digits, got {len(digits)}")
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def mask_cpf(text: str) -> str:
    """Hide all but the check digits, for log output."""
    digits = strip_non_digits(text)
    return f"***.***.***-{digits[-2:]}" if len(digits) >= 2 else "***"


def validate_cpf(id_number: str, *, strict_format: bool = False) -> Outcome[CPF]:
    """Validate a trimmed CPF and return its canonical punctuated form.

    With ``strict_format`` only bare digits or the canonical punctuation are
    accepted; otherwise every non-digit character is ignored.
    """
    if not id_number:
        return _reject(ErrorKind.BLANK_ID, id_number)
    if strict_format and not STRICT_CPF_PATTERN.fullmatch(id_number):
        return _reject(ErrorKind.INVALID_ID, id_number)
    if not is_valid_cpf(id_number):
        return _reject(ErrorKind.INVALID_ID, id_number)
    return Outcome[CPF].success(format_cpf(id_number))


def _reject(kind: ErrorKind, id_number: str) -> Outcome[CPF]:
    logger.debug("cpf %s rejected: %s", mask_cpf(id_number), kind.value)
    return Outcome[CPF].failure(ValidationIssue.of(FieldName.ID_NUMBER, kind))
