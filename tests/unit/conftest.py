"""Unit test fixtures: pinned clock, default settings, clean environment."""

from __future__ import annotations

import os
from datetime import date

import pytest

from cadastro.core.config import AppSettings, ValidationConfig
from tests.fakes import FixedClock

TODAY = date(2024, 6, 15)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep CADASTRO_* variables from the shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("CADASTRO_"):
            monkeypatch.delenv(key)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(validation=ValidationConfig())
