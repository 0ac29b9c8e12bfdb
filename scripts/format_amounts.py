#!/usr/bin/env python3
"""Show how amounts render and how typed text is read back in every currency.

Usage:
    python scripts/format_amounts.py <amount_or_text> [<amount_or_text> ...]

Each argument is typed into a fresh field per currency, then the field is blurred.
Set CURRENCY_INPUT_LOG_LEVEL=DEBUG to see the field transitions.
"""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from currency_input.config import Settings
from currency_input.field.controller import CurrencyField
from currency_input.international.locale_registry import currency_name, supported_currency_codes
from currency_input.utils.logging import setup_logging


def main() -> None:
    if len(sys.argv) < 2:
        print("Usage: python scripts/format_amounts.py <amount_or_text> [<amount_or_text> ...]")
        print()
        print("Example:")
        print("  python scripts/format_amounts.py 1234.5 '1.234,56' 12,34,56")
        sys.exit(1)

    settings = Settings()
    setup_logging(settings.log_level, json_output=False)

    for typed in sys.argv[1:]:
        print(f"Typed: {typed!r}")
        print("-" * 50)
        for code in supported_currency_codes():
            reported: list[float] = []
            field = CurrencyField(0, reported.append, currency=code)
            field.focus()
            field.input(typed)
            editing = field.buffer
            amount = field.blur()
            print(
                f"  {code} ({currency_name(code)}): typing {editing!r} -> "
                f"{amount} -> {field.symbol} {field.buffer or field.input_attrs['placeholder']}"
            )
        print()


if __name__ == "__main__":
    main()
