"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings

KNOWN_DATE_FORMATS = ("dd/MM/yyyy", "ddMMyyyy", "ddMMyy")


class ValidationConfig(BaseSettings):
    """Rule-set knobs for the personal data validators."""

    model_config = {"env_prefix": "CADASTRO_VALIDATION_"}

    reject_double_spaces: bool = True
    strict_id_format: bool = False  # only bare digits or 000.000.000-00
    min_age: int = 18
    max_age: int = 130
    date_formats: list[str] = list(KNOWN_DATE_FORMATS)
    two_digit_year_pivot: int = 100  # yy below pivot -> 20yy, else 19yy

    @field_validator("date_formats")
    @classmethod
    def _known_formats(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one date format is required")
        unknown = [name for name in value if name not in KNOWN_DATE_FORMATS]
        if unknown:
            raise ValueError(f"unknown date formats: {', '.join(unknown)}")
        return value

    @field_validator("two_digit_year_pivot")
    @classmethod
    def _pivot_range(cls, value: int) -> int:
        if not 0 <= value <= 100:
            raise ValueError("two_digit_year_pivot must be between 0 and 100")
        return value

    @model_validator(mode="after")
    def _age_bounds(self) -> ValidationConfig:
        if self.min_age < 0 or self.min_age >= self.max_age:
            raise ValueError("age bounds must satisfy 0 <= min_age < max_age")
        return self


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "CADASTRO_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    validation: ValidationConfig = ValidationConfig()
