"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cadastro.core.config import AppSettings, ValidationConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "WARNING"
    assert settings.validation.min_age == 18


def test_validation_config_defaults():
    config = ValidationConfig()
    assert config.reject_double_spaces is True
    assert config.strict_id_format is False
    assert config.max_age == 130
    assert config.date_formats == ["dd/MM/yyyy", "ddMMyyyy", "ddMMyy"]
    assert config.two_digit_year_pivot == 100


def test_env_overrides_validation_config(monkeypatch):
    monkeypatch.setenv("CADASTRO_VALIDATION_MIN_AGE", "21")
    monkeypatch.setenv("CADASTRO_VALIDATION_REJECT_DOUBLE_SPACES", "false")
    monkeypatch.setenv("CADASTRO_VALIDATION_DATE_FORMATS", '["ddMMyyyy"]')
    config = ValidationConfig()
    assert config.min_age == 21
    assert config.reject_double_spaces is False
    assert config.date_formats == ["ddMMyyyy"]


def test_env_overrides_app_settings(monkeypatch):
    monkeypatch.setenv("CADASTRO_ENVIRONMENT", "prod")
    monkeypatch.setenv("CADASTRO_LOG_LEVEL", "DEBUG")
    settings = AppSettings()
    assert settings.environment == "prod"
    assert settings.log_level == "DEBUG"


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("CADASTRO_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        AppSettings()


def test_rejects_inverted_age_bounds():
    with pytest.raises(ValidationError):
        ValidationConfig(min_age=140, max_age=130)


def test_rejects_unknown_date_format():
    with pytest.raises(ValidationError):
        ValidationConfig(date_formats=["yyyy-MM-dd"])


def test_rejects_empty_date_formats():
    with pytest.raises(ValidationError):
        ValidationConfig(date_formats=[])


def test_rejects_pivot_out_of_range():
    with pytest.raises(ValidationError):
        ValidationConfig(two_digit_year_pivot=101)
