"""Locale profile types for currency amount fields.

A ``LocaleProfile`` carries the display rules for one currency: the symbol shown
beside the field, how many fractional digits an amount keeps, and which characters
separate decimals and digit groups.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CurrencyCode(StrEnum):
    USD = "USD"
    EUR = "EUR"
    CHF = "CHF"
    GBP = "GBP"
    BRL = "BRL"


class LocaleProfile(BaseModel):
    """Immutable formatting rules for a single currency code."""

    model_config = ConfigDict(frozen=True)

    currency_code: CurrencyCode
    symbol: str
    decimal_places: int = Field(default=2, ge=0)
    decimal_separator: str = Field(default=".", min_length=1, max_length=1)
    group_separator: str = Field(default=",", min_length=1, max_length=1)

    @model_validator(mode="after")
    def check_separators(self) -> LocaleProfile:
        if self.decimal_separator == self.group_separator:
            raise ValueError(
                f"decimal and group separators must differ for {self.currency_code}, "
                f"both are {self.decimal_separator!r}"
            )
        return self


class CurrencyOption(BaseModel):
    """A selectable currency, as offered by host forms."""

    model_config = ConfigDict(frozen=True)

    value: CurrencyCode
    label: str
