"""Protocol interfaces for Cadastro collaborators.

Structural typing, no inheritance required, easy to swap in tests.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@runtime_checkable
class IClock(Protocol):
    """Source of "today" for age checks."""

    def today(self) -> date: ...
