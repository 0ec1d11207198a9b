"""Temporal co-play graph: ingestion, projections, churn, filters and stats."""

from .builder import EvolutionGraph, EvolutionGraphBuilder
from .churn import RosterChange
from .filtering import (
    GraphFilter,
    apply_filters,
    filter_by_min_weight,
    filter_by_players,
    limit_to_top_nodes,
    rank_by_degree,
)
from .projection import Adjacency
from .registry import PlayerRegistry
from .stats import (
    SeasonStats,
    TopConnected,
    count_edges,
    evolution_stats,
    format_summary,
    most_connected,
    top_connected,
)
from .store import PairKey, TemporalEdgeStore, pair_key

__all__ = [
    "Adjacency",
    "EvolutionGraph",
    "EvolutionGraphBuilder",
    "GraphFilter",
    "PairKey",
    "PlayerRegistry",
    "RosterChange",
    "SeasonStats",
    "TemporalEdgeStore",
    "TopConnected",
    "apply_filters",
    "count_edges",
    "evolution_stats",
    "filter_by_min_weight",
    "filter_by_players",
    "format_summary",
    "limit_to_top_nodes",
    "most_connected",
    "pair_key",
    "rank_by_degree",
    "top_connected",
]
