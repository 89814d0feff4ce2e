"""Shared test doubles — re-export clock implementations."""

from __future__ import annotations

from cadastro.clock import FixedClock, SystemClock

__all__ = ["FixedClock", "SystemClock"]
