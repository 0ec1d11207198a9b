"""Team-season roster identifiers."""

from __future__ import annotations

from typing import NamedTuple


class RosterKey(NamedTuple):
    team: str
    season: int
