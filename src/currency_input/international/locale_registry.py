"""Closed table of currency locale profiles."""
from __future__ import annotations
import structlog
from ..models.locale import CurrencyCode, CurrencyOption, LocaleProfile

logger = structlog.get_logger(__name__)


class UnknownCurrency(ValueError):
    """A currency code outside the supported set reached the engine.

    This is a configuration error: codes must be validated upstream before a
    field is built for them.
    """

    def __init__(self, currency_code: str):
        self.currency_code = currency_code
        super().__init__(
            f"currency '{currency_code}' is not supported. "
            f"Supported currencies: {supported_currency_codes_string()}"
        )


# Table order is the order offered to users; the first entry is the default.
CURRENCY_PROFILES: dict[str, LocaleProfile] = {
    "USD": LocaleProfile(currency_code=CurrencyCode.USD, symbol="$", decimal_places=2, decimal_separator=".", group_separator=","),
    "EUR": LocaleProfile(currency_code=CurrencyCode.EUR, symbol="€", decimal_places=2, decimal_separator=".", group_separator=","),
    "CHF": LocaleProfile(currency_code=CurrencyCode.CHF, symbol="CHF", decimal_places=2, decimal_separator=".", group_separator="'"),
    "GBP": LocaleProfile(currency_code=CurrencyCode.GBP, symbol="£", decimal_places=2, decimal_separator=".", group_separator=","),
    "BRL": LocaleProfile(currency_code=CurrencyCode.BRL, symbol="R$", decimal_places=2, decimal_separator=",", group_separator="."),
}

CURRENCY_NAMES: dict[str, str] = {
    "USD": "United States Dollar",
    "EUR": "Euro",
    "CHF": "Swiss Franc",
    "GBP": "Pound Sterling",
    "BRL": "Brazilian Real",
}

DEFAULT_CURRENCY = next(iter(CURRENCY_PROFILES))


def lookup(currency_code: str) -> LocaleProfile:
    """Return the locale profile for *currency_code*.

    Raises ``UnknownCurrency`` for codes outside the table. Lookup is case-sensitive.
    """
    profile = CURRENCY_PROFILES.get(currency_code)
    if profile is None:
        logger.error("unknown_currency", currency=currency_code)
        raise UnknownCurrency(currency_code)
    return profile


def supported_currency_codes() -> list[str]:
    return list(CURRENCY_PROFILES)


def supported_currency_codes_string() -> str:
    """Space-separated supported codes, e.g. for ``oneof`` style validators."""
    return " ".join(supported_currency_codes())


def is_valid_currency(currency_code: str) -> bool:
    return currency_code in CURRENCY_PROFILES


def validate_currency(currency_code: str) -> None:
    """Raise ``UnknownCurrency`` unless *currency_code* is supported."""
    if not is_valid_currency(currency_code):
        raise UnknownCurrency(currency_code)


def currency_name(currency_code: str) -> str:
    return CURRENCY_NAMES.get(currency_code, "Unknown Currency")


def currency_options() -> list[CurrencyOption]:
    """Options for a currency selector, in table order."""
    return [
        CurrencyOption(value=profile.currency_code, label=CURRENCY_NAMES[code])
        for code, profile in CURRENCY_PROFILES.items()
    ]
