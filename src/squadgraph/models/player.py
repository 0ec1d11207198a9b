"""Canonical player model shared by the codec, the scraper and the graph."""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

UNKNOWN = "N/A"
UNKNOWN_NUMBER = -1


def parse_int_safe(value: Optional[str]) -> int:
    """Parse an integer out of ``value``, returning ``-1`` when it has none."""

    if value is None:
        return UNKNOWN_NUMBER
    text = value.strip()
    if not text or text in {UNKNOWN, "-"}:
        return UNKNOWN_NUMBER
    digits = re.sub(r"[^0-9-]", "", text)
    try:
        return int(digits)
    except ValueError:
        return UNKNOWN_NUMBER


class PlayerRecord(BaseModel):
    """Latest known attributes for a single player."""

    name: str = Field(..., min_length=1)
    number: int = UNKNOWN_NUMBER
    position: str = UNKNOWN
    date_of_birth: str = UNKNOWN
    age: int = UNKNOWN_NUMBER
    nationality: str = UNKNOWN
    current_club: str = UNKNOWN
    height: str = UNKNOWN
    foot: str = UNKNOWN
    joined: str = UNKNOWN
    signed_from: str = UNKNOWN
    market_value: str = UNKNOWN

    model_config = ConfigDict(frozen=True)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value or value == UNKNOWN:
            raise ValueError("player name is required")
        return value

    @field_validator(
        "position",
        "date_of_birth",
        "nationality",
        "current_club",
        "height",
        "foot",
        "joined",
        "signed_from",
        "market_value",
        mode="before",
    )
    @classmethod
    def _unknown_if_blank(cls, value: object) -> object:
        if value is None:
            return UNKNOWN
        if isinstance(value, str):
            text = value.strip()
            return UNKNOWN if not text or text == "-" else text
        return value

    @field_validator("number", "age", mode="before")
    @classmethod
    def _unknown_if_unparseable(cls, value: object) -> int:
        if isinstance(value, bool):
            return UNKNOWN_NUMBER
        if isinstance(value, int):
            return value
        if value is None or isinstance(value, str):
            return parse_int_safe(value)
        try:
            return int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError, OverflowError):
            return UNKNOWN_NUMBER
