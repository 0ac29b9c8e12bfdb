"""Focus-aware controller for a currency amount field.

The host form owns the canonical amount and hands it to the field together with
a change callback. While the field is blurred the buffer shows the display form
of the host amount. Focusing switches the buffer to the typing form; every
keystroke is sanitized, parsed and reported straight back to the host. Blurring
parses the buffer once more, renders it in display form and reports the final
amount.

Host value changes that arrive during an edit are recorded but never written to
the buffer, so re-renders cannot clobber what the user is typing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from currency_input.config import Settings
from currency_input.international.locale_registry import lookup
from currency_input.international.number_formatting import format_for_display, input_hints
from currency_input.international.number_parsing import parse_from_display, sanitize_typed, to_typing_form
from currency_input.models.field import EditSession, FieldState
from currency_input.models.locale import LocaleProfile

logger = structlog.get_logger(__name__)


class CurrencyField:
    """Two-state (blurred / focused) controller for one amount input."""

    def __init__(
        self,
        value: float,
        on_change: Callable[[float], None],
        currency: str | None = None,
        **attrs: Any,
    ):
        self._value = value
        self._on_change = on_change
        self._profile = lookup(currency or Settings().default_currency)
        # Label, error text, disabled flag and the like belong to the host.
        self.attrs = attrs
        self._session: EditSession | None = None
        self._buffer = format_for_display(value, self._profile)

    # ── State ──────────────────────────────────────────────────────────────

    @property
    def state(self) -> FieldState:
        return FieldState.FOCUSED if self._session is not None else FieldState.BLURRED

    @property
    def focused(self) -> bool:
        return self._session is not None

    @property
    def buffer(self) -> str:
        """Text currently shown in the input."""
        if self._session is not None:
            return self._session.buffer
        return self._buffer

    @property
    def session(self) -> EditSession | None:
        return self._session

    @property
    def value(self) -> float:
        """Last canonical amount known to both the field and the host."""
        return self._value

    @property
    def profile(self) -> LocaleProfile:
        return self._profile

    @property
    def symbol(self) -> str:
        """Currency symbol rendered as an adornment outside the editable text."""
        return self._profile.symbol

    @property
    def input_attrs(self) -> dict[str, str]:
        return input_hints(self._profile)

    # ── UI events ──────────────────────────────────────────────────────────

    def focus(self) -> None:
        """Enter editing mode with the buffer in typing form."""
        if self._session is not None:
            return

        if self._value == 0:
            buffer = ""
        else:
            buffer = to_typing_form(format_for_display(self._value, self._profile), self._profile)
        self._session = EditSession(buffer=buffer, caret_offset=len(buffer))
        logger.debug("currency_field_focused", currency=self._profile.currency_code)

    def input(self, raw_text: str) -> float:
        """Apply the raw text of an input event and report the parsed amount.

        Outside an edit session the event is treated as arriving right after an
        implicit focus.
        """
        if self._session is None:
            self.focus()
        session = self._session

        buffer = sanitize_typed(raw_text, self._profile)
        session.buffer = buffer
        session.prior_raw_length = len(raw_text)
        session.caret_offset = len(buffer)

        amount = parse_from_display(buffer, self._profile)
        self._propagate(amount)
        return amount

    def blur(self) -> float:
        """Leave editing mode, normalise the buffer and report the final amount."""
        text = self.buffer
        amount = parse_from_display(text, self._profile)
        self._session = None
        self._buffer = format_for_display(amount, self._profile)
        logger.debug("currency_field_blurred", currency=self._profile.currency_code)
        self._propagate(amount)
        return amount

    # ── Host updates ───────────────────────────────────────────────────────

    def set_host_value(self, value: float) -> None:
        """Receive a new amount from the host form."""
        self._value = value
        if self._session is not None:
            logger.debug("host_value_ignored_while_editing", currency=self._profile.currency_code)
            return
        self._buffer = format_for_display(value, self._profile)

    def set_currency(self, currency: str) -> None:
        """Switch the field to another currency's formatting rules.

        An in-progress edit is carried over: the buffer is read with the old
        separators and rewritten in the new currency's typing form.
        """
        previous = self._profile
        self._profile = lookup(currency)
        if self._session is None:
            self._buffer = format_for_display(self._value, self._profile)
            return

        amount = parse_from_display(self._session.buffer, previous)
        buffer = to_typing_form(format_for_display(amount, self._profile), self._profile)
        self._session.buffer = buffer
        self._session.caret_offset = len(buffer)
        logger.debug(
            "currency_changed_while_editing",
            previous=previous.currency_code,
            currency=self._profile.currency_code,
        )

    def _propagate(self, amount: float) -> None:
        self._value = amount
        self._on_change(amount)
