"""Locale-aware parsing of typed currency amounts."""
from __future__ import annotations
import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from ..models.locale import LocaleProfile

# Leading number the way a lenient float parser reads it: "12." -> 12, "1.2.3" -> 1.2
_LEADING_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+")

# Float max is ~1.8e308; anything with a larger exponent cannot be a finite amount.
_MAX_ADJUSTED_EXPONENT = 308


def _quantum(decimal_places: int) -> Decimal:
    return Decimal(1).scaleb(-decimal_places)


def round_decimal(value: Decimal, decimal_places: int) -> Decimal:
    """Round to *decimal_places*, ties away from zero.

    Precision is sized to the value so no digit count or scale can overflow it.
    """
    context = Context(prec=max(value.adjusted(), 0) + decimal_places + 2, rounding=ROUND_HALF_UP)
    return value.quantize(_quantum(decimal_places), context=context)


def parse_from_display(text: str, profile: LocaleProfile) -> float:
    """Parse typed or displayed text into a canonical amount.

    Handles:
    - Display form: "1,234.56" (USD) -> 1234.56, "1.234,56" (BRL) -> 1234.56
    - Typing form: "1234,5" (BRL) -> 1234.5, "12." -> 12.0
    - Symbols and letters are ignored: "$1,234.56" -> 1234.56
    - Anything without digits -> 0.0

    A leading minus sign is stripped with the other symbols, so the result is
    never negative. Never raises.
    """
    if not text:
        return 0.0

    kept = re.escape(profile.decimal_separator) + re.escape(profile.group_separator)
    cleaned = re.sub(rf'[^0-9{kept}]', '', text)
    cleaned = cleaned.replace(profile.group_separator, '')
    if profile.decimal_separator != '.':
        cleaned = cleaned.replace(profile.decimal_separator, '.')

    match = _LEADING_NUMBER.match(cleaned)
    if match is None:
        return 0.0

    value = Decimal(match.group())
    if value.adjusted() > _MAX_ADJUSTED_EXPONENT:
        return 0.0

    result = float(round_decimal(value, profile.decimal_places))
    return result if math.isfinite(result) else 0.0


def sanitize_typed(raw_input: str, profile: LocaleProfile) -> str:
    """Constrain raw keystroke text to the typing form.

    The result holds only digits and at most one decimal separator, with at most
    ``decimal_places`` digits after it. Grouping is removed; extra decimal
    separators are dropped and the digits after them joined onto the fraction
    before it is truncated. No padding is added.
    """
    if not raw_input:
        return ""

    cleaned = re.sub(r'[^0-9.,]', '', raw_input)
    cleaned = re.sub(re.escape(profile.group_separator), '', cleaned)
    # Whichever of "." and "," is not the decimal separator is grouping noise.
    for mark in ".,":
        if mark != profile.decimal_separator:
            cleaned = cleaned.replace(mark, '')

    integer_part, sep, fraction = cleaned.partition(profile.decimal_separator)
    if not sep:
        return integer_part
    if profile.decimal_places == 0:
        return integer_part

    fraction = fraction.replace(profile.decimal_separator, '')
    return f"{integer_part}{sep}{fraction[:profile.decimal_places]}"


def to_typing_form(display: str, profile: LocaleProfile) -> str:
    """Remove group separators from a display string, keeping the decimal separator."""
    return display.replace(profile.group_separator, '')
