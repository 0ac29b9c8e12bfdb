"""Render canonical amounts for display beside a currency symbol."""
from __future__ import annotations
import math
from decimal import Decimal
from ..models.locale import LocaleProfile
from .number_parsing import round_decimal

# Constrains mobile keyboards; the sanitizer enforces the real rules.
INPUT_PATTERN = "[0-9]*[.,]?[0-9]*"


def format_for_display(amount: float | int | Decimal | None, profile: LocaleProfile) -> str:
    """Format *amount* as grouped, zero-padded display text.

    Zero and non-finite values render as the empty string, so an unset field and
    a zero amount look the same. The currency symbol is not included.

    USD: 1234.5 -> "1,234.50"; BRL: 1234.5 -> "1.234,50"; CHF: 1234.5 -> "1'234.50"
    """
    if amount is None:
        return ""
    number = float(amount)
    if not math.isfinite(number) or number == 0:
        return ""

    rounded = round_decimal(Decimal(repr(number)), profile.decimal_places)
    text = f"{rounded.copy_abs():,f}"
    text = text.translate(str.maketrans({",": profile.group_separator, ".": profile.decimal_separator}))
    if rounded < 0:
        return f"-{text}"
    return text


def placeholder(profile: LocaleProfile) -> str:
    """Hint text for an empty field, e.g. "0.00" or "0,00"."""
    if profile.decimal_places == 0:
        return "0"
    return f"0{profile.decimal_separator}{'0' * profile.decimal_places}"


def input_hints(profile: LocaleProfile) -> dict[str, str]:
    """Attributes a host puts on the underlying text input."""
    return {
        "inputmode": "decimal",
        "pattern": INPUT_PATTERN,
        "placeholder": placeholder(profile),
    }
