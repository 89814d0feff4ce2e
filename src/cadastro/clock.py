"""IClock implementations: wall clock and a pinned date for tests."""

from __future__ import annotations

from datetime import date


class SystemClock:
    """IClock backed by the local system date."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """IClock that always answers the same date."""

    def __init__(self, fixed: date) -> None:
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed
