"""Per-season evolution statistics for an :class:`EvolutionGraph`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Mapping, Optional, Set

from .filtering import rank_by_degree
from .store import PairKey, pair_key

if TYPE_CHECKING:
    from .builder import EvolutionGraph


@dataclass(frozen=True)
class SeasonStats:
    season: int
    nodes_in_season: int
    edges_in_season: int
    cumulative_nodes: int
    cumulative_edges: int
    new_players: int
    departed_players: int

    @property
    def average_degree(self) -> float:
        if self.nodes_in_season == 0:
            return 0.0
        return 2.0 * self.edges_in_season / self.nodes_in_season


@dataclass(frozen=True)
class TopConnected:
    season: int
    rank: int
    player: str
    connections: int


def count_edges(graph: Mapping[str, Mapping[str, int]]) -> int:
    """Number of distinct undirected pairs with a positive weight."""

    counted: Set[PairKey] = set()
    for player, edges in graph.items():
        for teammate, weight in edges.items():
            if weight > 0 and player != teammate:
                counted.add(pair_key(player, teammate))
    return len(counted)


def most_connected(graph: Mapping[str, Mapping[str, int]]) -> Optional[str]:
    """Player with the most teammates; ties go to the alphabetically first name."""

    ranked = rank_by_degree(graph, 1)
    return ranked[0][0] if ranked else None


def evolution_stats(graph: "EvolutionGraph") -> List[SeasonStats]:
    stats: List[SeasonStats] = []
    for season in graph.seasons:
        season_graph = graph.snapshot(season)
        cumulative = graph.cumulative(season)
        stats.append(
            SeasonStats(
                season=season,
                nodes_in_season=len(season_graph),
                edges_in_season=count_edges(season_graph),
                cumulative_nodes=len(cumulative),
                cumulative_edges=count_edges(cumulative),
                new_players=len(graph.new_players(season)),
                departed_players=len(graph.departed_players(season)),
            )
        )
    return stats


def top_connected(graph: "EvolutionGraph", top_n: int) -> List[TopConnected]:
    """Best-connected players of each season's snapshot."""

    rows: List[TopConnected] = []
    for season in graph.seasons:
        ranked = rank_by_degree(graph.snapshot(season), top_n)
        rows.extend(
            TopConnected(season=season, rank=index, player=player, connections=degree)
            for index, (player, degree) in enumerate(ranked, start=1)
        )
    return rows


def format_summary(graph: "EvolutionGraph") -> str:
    """Render the season table printed by ``squadgraph summary``."""

    if not graph.has_data:
        return "No data loaded. Check that roster CSV files exist in the data folder."

    lines = [
        "Graph evolution summary",
        "{:<8} | {:<12} | {:<12} | {:<14} | {:<14} | {:<8} | {:<8}".format(
            "Season", "Nodes(year)", "Edges(year)", "Nodes(cumul)", "Edges(cumul)", "Joined", "Left"
        ),
    ]
    for row in evolution_stats(graph):
        lines.append(
            "{:<8} | {:<12} | {:<12} | {:<14} | {:<14} | {:<8} | {:<8}".format(
                row.season,
                row.nodes_in_season,
                row.edges_in_season,
                row.cumulative_nodes,
                row.cumulative_edges,
                row.new_players,
                row.departed_players,
            )
        )

    full = graph.full_graph()
    leader = most_connected(full)
    if leader is not None:
        lines.append(
            f"Most connected player overall: {leader} ({len(full[leader])} unique teammates)"
        )
    return "\n".join(lines)


__all__ = [
    "SeasonStats",
    "TopConnected",
    "count_edges",
    "evolution_stats",
    "format_summary",
    "most_connected",
    "top_connected",
]
