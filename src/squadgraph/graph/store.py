"""Per-pair season counters for the co-play graph."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, NamedTuple, Optional, Tuple, Union


class PairKey(NamedTuple):
    """Unordered pair of player names, stored with ``first < second``."""

    first: str
    second: str


def pair_key(player_a: str, player_b: str) -> PairKey:
    """Return the canonical key for two distinct players."""

    if player_a == player_b:
        raise ValueError(f"cannot pair player {player_a!r} with itself")
    if player_a < player_b:
        return PairKey(player_a, player_b)
    return PairKey(player_b, player_a)


_EMPTY: Mapping[int, int] = MappingProxyType({})


class TemporalEdgeStore:
    """Maps each canonical pair to ``{season: co-occurrence count}``.

    Zero counts are never stored; a pair that never shared a roster has no
    entry at all.
    """

    def __init__(self) -> None:
        self._edges: Dict[PairKey, Dict[int, int]] = {}

    def add(self, player_a: str, player_b: str, season: int, count: int = 1) -> PairKey:
        if count < 1:
            raise ValueError("count must be a positive integer")
        key = pair_key(player_a, player_b)
        seasons = self._edges.setdefault(key, {})
        seasons[season] = seasons.get(season, 0) + count
        return key

    def seasons_of(
        self, key: Union[PairKey, Tuple[str, str], str], other: Optional[str] = None
    ) -> Mapping[int, int]:
        """Season counts for a pair; accepts a key or two player names."""

        if other is not None:
            if not isinstance(key, str) or key == other:
                return _EMPTY
            key = pair_key(key, other)
        elif not isinstance(key, PairKey):
            first, second = key
            if first == second:
                return _EMPTY
            key = pair_key(first, second)
        seasons = self._edges.get(key)
        if seasons is None:
            return _EMPTY
        return MappingProxyType(seasons)

    def pairs(self) -> Iterator[PairKey]:
        return iter(self._edges)

    def items(self) -> Iterator[Tuple[PairKey, Mapping[int, int]]]:
        for key, seasons in self._edges.items():
            yield key, MappingProxyType(seasons)

    def freeze(self) -> "TemporalEdgeStore":
        """Return an independent copy that later ``add`` calls cannot reach."""

        frozen = TemporalEdgeStore()
        frozen._edges = {key: dict(seasons) for key, seasons in self._edges.items()}
        return frozen

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, key: object) -> bool:
        return key in self._edges


__all__ = ["PairKey", "TemporalEdgeStore", "pair_key"]
