"""State carried by a currency field between UI events."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class FieldState(StrEnum):
    BLURRED = "blurred"
    FOCUSED = "focused"


class EditSession(BaseModel):
    """Ephemeral edit state for one focus cycle.

    Created when the field gains focus and discarded on blur. While a session
    exists its buffer is authoritative over host-driven value changes.
    """

    focused: bool = True
    buffer: str = ""
    prior_raw_length: int = 0
    caret_offset: int = 0
