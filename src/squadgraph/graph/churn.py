"""Season-to-season membership changes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Literal, Mapping, Set

from squadgraph.models import RosterKey


@dataclass(frozen=True)
class RosterChange:
    season: int
    change_type: Literal["JOINED", "LEFT"]
    player: str


def active_players(rosters: Mapping[RosterKey, FrozenSet[str]], season: int) -> Set[str]:
    """Every player on any team's roster in ``season``."""

    active: Set[str] = set()
    for (_, roster_season), members in rosters.items():
        if roster_season == season:
            active.update(members)
    return active


def new_players(rosters: Mapping[RosterKey, FrozenSet[str]], season: int) -> Set[str]:
    return active_players(rosters, season) - active_players(rosters, season - 1)


def departed_players(rosters: Mapping[RosterKey, FrozenSet[str]], season: int) -> Set[str]:
    return active_players(rosters, season) - active_players(rosters, season + 1)


def roster_changes(
    rosters: Mapping[RosterKey, FrozenSet[str]], seasons: Iterable[int]
) -> List[RosterChange]:
    """Joined/left events for each season, ordered by season, type, then name."""

    changes: List[RosterChange] = []
    for season in sorted(seasons):
        changes.extend(
            RosterChange(season, "JOINED", player)
            for player in sorted(new_players(rosters, season))
        )
        changes.extend(
            RosterChange(season, "LEFT", player)
            for player in sorted(departed_players(rosters, season))
        )
    return changes


__all__ = [
    "RosterChange",
    "active_players",
    "departed_players",
    "new_players",
    "roster_changes",
]
