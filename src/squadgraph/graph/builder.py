"""Build-phase ingestion and the read-only graph it publishes."""

from __future__ import annotations

import logging
from itertools import combinations
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple, Union

from pydantic import ValidationError

from squadgraph.models import PlayerRecord, RosterKey

from . import churn, projection
from .projection import Adjacency
from .registry import PlayerRegistry
from .store import TemporalEdgeStore


logger = logging.getLogger(__name__)

Member = Union[PlayerRecord, Mapping[str, Any]]


def _coerce_member(member: Member, *, team: str, season: int) -> Optional[PlayerRecord]:
    if isinstance(member, PlayerRecord):
        return member
    try:
        return PlayerRecord.model_validate(dict(member))
    except (TypeError, ValueError, ValidationError) as exc:
        logger.warning("Skipping invalid player row for %s %s: %s", team, season, exc)
        return None


class EvolutionGraphBuilder:
    """Single-writer accumulator for team-season rosters.

    Call :meth:`ingest` once per roster, then :meth:`build` to obtain an
    immutable :class:`EvolutionGraph` for querying.
    """

    def __init__(self) -> None:
        self._registry = PlayerRegistry()
        self._store = TemporalEdgeStore()
        self._rosters: Dict[RosterKey, FrozenSet[str]] = {}
        self._seasons: Set[int] = set()
        self._teams: Set[str] = set()

    def ingest(self, team: str, season: int, members: Iterable[Member]) -> int:
        """Add one team's squad for ``season`` and return the accepted member count.

        Re-ingesting a key replaces its roster but adds the co-play counts
        again, so the same squad ingested twice doubles that season's weights.
        """

        names: Set[str] = set()
        for member in members:
            record = _coerce_member(member, team=team, season=season)
            if record is None:
                continue
            self._registry.upsert(record, season)
            names.add(record.name)

        key = RosterKey(team, season)
        if key in self._rosters:
            logger.info("Replacing roster for %s %s", team, season)
        self._rosters[key] = frozenset(names)
        self._teams.add(team)
        self._seasons.add(season)

        for player_a, player_b in combinations(sorted(names), 2):
            self._store.add(player_a, player_b, season)

        logger.debug("Ingested %s %s with %d players", team, season, len(names))
        return len(names)

    def build(self) -> "EvolutionGraph":
        """Publish a frozen copy of the current state."""

        return EvolutionGraph(
            players=self._registry.as_mapping(),
            store=self._store.freeze(),
            rosters=dict(self._rosters),
            seasons=self._seasons,
            teams=self._teams,
        )


class EvolutionGraph:
    """Immutable co-play graph with season-aware queries.

    Every method is a pure read, so one instance can be shared between
    threads without locking.
    """

    def __init__(
        self,
        *,
        players: Mapping[str, PlayerRecord],
        store: TemporalEdgeStore,
        rosters: Mapping[RosterKey, FrozenSet[str]],
        seasons: Iterable[int],
        teams: Iterable[str],
    ) -> None:
        self._players = MappingProxyType(dict(players))
        self._store = store
        self._rosters = MappingProxyType(dict(rosters))
        self._seasons: Tuple[int, ...] = tuple(sorted(set(seasons)))
        self._teams: Tuple[str, ...] = tuple(sorted(set(teams)))

    @classmethod
    def empty(cls) -> "EvolutionGraph":
        return EvolutionGraphBuilder().build()

    @property
    def players(self) -> Mapping[str, PlayerRecord]:
        return self._players

    @property
    def store(self) -> TemporalEdgeStore:
        return self._store

    @property
    def rosters(self) -> Mapping[RosterKey, FrozenSet[str]]:
        return self._rosters

    @property
    def seasons(self) -> Tuple[int, ...]:
        """Observed seasons in ascending order."""

        return self._seasons

    @property
    def teams(self) -> Tuple[str, ...]:
        return self._teams

    @property
    def has_data(self) -> bool:
        return bool(self._seasons)

    def player(self, name: str) -> Optional[PlayerRecord]:
        return self._players.get(name)

    # Projections

    def snapshot(self, season: int) -> Adjacency:
        return projection.snapshot(self._store, season)

    def cumulative(self, upto_season: int) -> Adjacency:
        return projection.cumulative(self._store, upto_season)

    def cumulative_between(self, start: Optional[int], end: int) -> Adjacency:
        return projection.cumulative_between(self._store, start, end)

    def full_graph(self) -> Adjacency:
        if not self._seasons:
            return {}
        return self.cumulative(self._seasons[-1])

    # Churn

    def active_players(self, season: int) -> Set[str]:
        return churn.active_players(self._rosters, season)

    def new_players(self, season: int) -> Set[str]:
        return churn.new_players(self._rosters, season)

    def departed_players(self, season: int) -> Set[str]:
        return churn.departed_players(self._rosters, season)

    def players_for_team(self, team: str, season: int) -> FrozenSet[str]:
        return self._rosters.get(RosterKey(team, season), frozenset())

    def roster_changes(self) -> List[churn.RosterChange]:
        return churn.roster_changes(self._rosters, self._seasons)


__all__ = ["EvolutionGraph", "EvolutionGraphBuilder"]
