"""Birth-date validation: parse, existence check, age window.

Accepted inputs are day-month-year with a slash separator and 4-digit year,
or contiguous digits with a 4- or 2-digit year. Formats are tried in order
and the first that parses structurally wins.

Parsing resolves the day leniently, clamping it to the last day of the month
(31/04 becomes 30/04). Re-rendering the resolved date in the same format and
comparing it with the input is what detects days that do not exist; the
structural parse alone never rejects them.
"""

from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass
from datetime import MINYEAR, date
from typing import Iterable, Optional, Sequence

from cadastro.core.types import FormatName
from cadastro.models.issues import ErrorKind, FieldName, ValidationIssue
from cadastro.models.outcome import Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateFormat:
    """One accepted textual layout for a birth date."""

    name: FormatName
    pattern: re.Pattern[str]
    separator: str
    year_digits: int

    def fields(self, text: str) -> Optional[tuple[int, int, int]]:
        """Return (day, month, year) as written, or None if the layout differs."""
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        return int(match["day"]), int(match["month"]), int(match["year"])

    def render(self, value: date) -> str:
        year = value.year % 100 if self.year_digits == 2 else value.year
        return self.separator.join(
            (f"{value.day:02d}", f"{value.month:02d}", f"{year:0{self.year_digits}d}")
        )


SLASHED = DateFormat(
    name="dd/MM/yyyy",
    pattern=re.compile(r"(?P<day>\d{2})/(?P<month>\d{2})/(?P<year>\d{4})", re.ASCII),
    separator="/",
    year_digits=4,
)
COMPACT = DateFormat(
    name="ddMMyyyy",
    pattern=re.compile(r"(?P<day>\d{2})(?P<month>\d{2})(?P<year>\d{4})", re.ASCII),
    separator="",
    year_digits=4,
)
COMPACT_SHORT_YEAR = DateFormat(
    name="ddMMyy",
    pattern=re.compile(r"(?P<day>\d{2})(?P<month>\d{2})(?P<year>\d{2})", re.ASCII),
    separator="",
    year_digits=2,
)

DATE_FORMATS: dict[FormatName, DateFormat] = {
    fmt.name: fmt for fmt in (SLASHED, COMPACT, COMPACT_SHORT_YEAR)
}
DEFAULT_FORMATS: tuple[DateFormat, ...] = (SLASHED, COMPACT, COMPACT_SHORT_YEAR)


def formats_named(names: Iterable[FormatName]) -> tuple[DateFormat, ...]:
    """Look up formats by name, keeping the given order."""
    return tuple(DATE_FORMATS[name] for name in names)


def years_before(day: date, years: int) -> date:
    """Same calendar day ``years`` earlier; Feb 29 falls back to Feb 28."""
    target = day.year - years
    if target < MINYEAR:
        return date.min
    try:
        return day.replace(year=target)
    except ValueError:
        return day.replace(year=target, day=28)


def expand_year(two_digits: int, pivot: int) -> int:
    """Two-digit years below ``pivot`` are 20yy, the rest 19yy.

    A pivot of 100, the default, reads every two-digit year as 20yy.
    """
    return two_digits + (2000 if two_digits < pivot else 1900)


def parse_lenient(text: str, fmt: DateFormat, *, pivot: int = 100) -> Optional[date]:
    """Structurally parse ``text`` in ``fmt``, clamping the day to the month.

    None means the text is not in this format at all: wrong layout, month
    outside 1-12, day outside 1-31 or year zero.
    """
    fields = fmt.fields(text)
    if fields is None:
        return None
    day, month, year = fields
    if fmt.year_digits == 2:
        year = expand_year(year, pivot)
    if not (1 <= month <= 12 and 1 <= day <= 31 and year >= MINYEAR):
        return None
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def describe_formats(formats: Sequence[DateFormat]) -> str:
    """'a', 'b' ou 'c'."""
    quoted = [f"'{fmt.name}'" for fmt in formats]
    if len(quoted) == 1:
        return quoted[0]
    return f"{', '.join(quoted[:-1])} ou {quoted[-1]}"


def validate_birth_date(
    text: str,
    *,
    today: date,
    min_age: int = 18,
    max_age: int = 130,
    formats: Sequence[DateFormat] = DEFAULT_FORMATS,
    two_digit_year_pivot: int = 100,
) -> Outcome[date]:
    """Validate a trimmed birth date; stops at the first failed check.

    Both age bounds are inclusive: someone turning ``min_age`` today and
    someone born exactly ``max_age`` years ago are accepted.
    """
    if not text:
        return _reject(ErrorKind.BLANK_DATE)

    for fmt in formats:
        resolved = parse_lenient(text, fmt, pivot=two_digit_year_pivot)
        if resolved is not None:
            break
    else:
        return _reject(ErrorKind.INVALID_DATE_FORMAT, formats=describe_formats(formats))

    if fmt.render(resolved) != text:
        return _reject(ErrorKind.NONEXISTENT_DATE)

    if resolved > years_before(today, min_age):
        return _reject(ErrorKind.UNDERAGE, min_age=min_age)
    if resolved < years_before(today, max_age):
        return _reject(ErrorKind.TOO_OLD, max_age=max_age)

    return Outcome[date].success(resolved)


def _reject(kind: ErrorKind, **context: object) -> Outcome[date]:
    logger.debug("birth date rejected: %s", kind.value)
    return Outcome[date].failure(ValidationIssue.of(FieldName.BIRTH_DATE, kind, **context))
