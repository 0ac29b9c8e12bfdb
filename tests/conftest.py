"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock
from currency_input.international.locale_registry import lookup
from currency_input.field.controller import CurrencyField


@pytest.fixture
def usd():
    return lookup("USD")


@pytest.fixture
def brl():
    return lookup("BRL")


@pytest.fixture
def chf():
    return lookup("CHF")


@pytest.fixture
def on_change():
    """Host change callback."""
    return MagicMock()


@pytest.fixture
def make_field(on_change):
    """Build a field bound to the shared host callback."""
    def _make(value: float = 0, currency: str = "USD", **attrs) -> CurrencyField:
        return CurrencyField(value, on_change, currency=currency, **attrs)
    return _make
