"""Application configuration via environment variables with CURRENCY_INPUT_ prefix."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from currency_input.international.locale_registry import DEFAULT_CURRENCY, validate_currency


class Settings(BaseSettings):
    """Currency input engine configuration.

    All settings are read from environment variables prefixed with ``CURRENCY_INPUT_``.
    The default currency is validated on load so a misconfigured deployment fails at
    startup rather than inside a form field.
    """

    model_config = SettingsConfigDict(env_prefix="CURRENCY_INPUT_")

    # ── Fields ─────────────────────────────────────────────────────────────
    default_currency: str = DEFAULT_CURRENCY

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    @field_validator("default_currency")
    @classmethod
    def check_default_currency(cls, value: str) -> str:
        validate_currency(value)
        return value

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        return value.upper()
