"""Domain models."""

from .player import UNKNOWN, UNKNOWN_NUMBER, PlayerRecord, parse_int_safe
from .roster import RosterKey

__all__ = ["PlayerRecord", "RosterKey", "UNKNOWN", "UNKNOWN_NUMBER", "parse_int_safe"]
