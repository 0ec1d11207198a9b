"""Helpers for slicing adjacency graphs by team, weight and degree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, List, Mapping, Optional, Tuple

from .projection import Adjacency


@dataclass(frozen=True)
class GraphFilter:
    """Filter configuration applied in a fixed order: players, weight, top-N."""

    players: Optional[frozenset[str]] = None
    min_weight: int = 1
    max_nodes: Optional[int] = None


def filter_by_players(graph: Mapping[str, Mapping[str, int]], allowed: AbstractSet[str]) -> Adjacency:
    """Keep edges whose endpoints are both in ``allowed``; drop isolated vertices."""

    filtered: Adjacency = {}
    for player, edges in graph.items():
        if player not in allowed:
            continue
        kept = {teammate: weight for teammate, weight in edges.items() if teammate in allowed}
        if kept:
            filtered[player] = kept
    return filtered


def filter_by_min_weight(graph: Mapping[str, Mapping[str, int]], min_weight: int) -> Adjacency:
    """Drop edges lighter than ``min_weight``; drop isolated vertices."""

    if min_weight < 1:
        raise ValueError("min_weight must be at least 1")
    filtered: Adjacency = {}
    for player, edges in graph.items():
        kept = {teammate: weight for teammate, weight in edges.items() if weight >= min_weight}
        if kept:
            filtered[player] = kept
    return filtered


def rank_by_degree(
    graph: Mapping[str, Mapping[str, int]], limit: Optional[int] = None
) -> List[Tuple[str, int]]:
    """Players ordered by degree descending, ties by name ascending."""

    ranked = sorted(
        ((player, len(edges)) for player, edges in graph.items()),
        key=lambda item: (-item[1], item[0]),
    )
    if limit is not None:
        ranked = ranked[: max(limit, 0)]
    return ranked


def limit_to_top_nodes(graph: Mapping[str, Mapping[str, int]], max_nodes: int) -> Adjacency:
    """Keep the ``max_nodes`` best-connected players and the edges among them."""

    if max_nodes < 0:
        raise ValueError("max_nodes must be non-negative")
    if len(graph) <= max_nodes:
        return {player: dict(edges) for player, edges in graph.items()}
    keep = {player for player, _ in rank_by_degree(graph, max_nodes)}
    return filter_by_players(graph, keep)


def apply_filters(graph: Mapping[str, Mapping[str, int]], criteria: GraphFilter) -> Adjacency:
    """Run every configured stage of ``criteria`` over ``graph``."""

    filtered: Adjacency = {player: dict(edges) for player, edges in graph.items()}
    if criteria.players is not None:
        filtered = filter_by_players(filtered, criteria.players)
    if criteria.min_weight > 1:
        filtered = filter_by_min_weight(filtered, criteria.min_weight)
    elif criteria.min_weight < 1:
        raise ValueError("min_weight must be at least 1")
    if criteria.max_nodes is not None:
        filtered = limit_to_top_nodes(filtered, criteria.max_nodes)
    return filtered


__all__ = [
    "GraphFilter",
    "apply_filters",
    "filter_by_min_weight",
    "filter_by_players",
    "limit_to_top_nodes",
    "rank_by_degree",
]
