"""Adjacency views derived from a :class:`TemporalEdgeStore`."""

from __future__ import annotations

from typing import Dict, Optional

from .store import PairKey, TemporalEdgeStore

Adjacency = Dict[str, Dict[str, int]]


def _link(graph: Adjacency, key: PairKey, weight: int) -> None:
    graph.setdefault(key.first, {})[key.second] = weight
    graph.setdefault(key.second, {})[key.first] = weight


def snapshot(store: TemporalEdgeStore, season: int) -> Adjacency:
    """Edges formed in ``season`` only, weighted by that season's count."""

    graph: Adjacency = {}
    for key, seasons in store.items():
        weight = seasons.get(season)
        if weight:
            _link(graph, key, weight)
    return graph


def cumulative_between(
    store: TemporalEdgeStore, start: Optional[int], end: int
) -> Adjacency:
    """Edges summed over seasons in ``[start, end]``; ``start=None`` is unbounded."""

    graph: Adjacency = {}
    for key, seasons in store.items():
        total = sum(
            count
            for season, count in seasons.items()
            if season <= end and (start is None or season >= start)
        )
        if total > 0:
            _link(graph, key, total)
    return graph


def cumulative(store: TemporalEdgeStore, upto_season: int) -> Adjacency:
    """Edges summed over every season up to and including ``upto_season``."""

    return cumulative_between(store, None, upto_season)


__all__ = ["Adjacency", "cumulative", "cumulative_between", "snapshot"]
