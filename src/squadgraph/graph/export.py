"""CSV export helpers for evolution statistics."""

from __future__ import annotations

import csv
from io import StringIO
from typing import TYPE_CHECKING

from .stats import evolution_stats, top_connected

if TYPE_CHECKING:
    from .builder import EvolutionGraph


def export_evolution_stats(graph: "EvolutionGraph") -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(
        [
            "Season",
            "NodesInSeason",
            "EdgesInSeason",
            "CumulativeNodes",
            "CumulativeEdges",
            "NewPlayers",
            "DepartedPlayers",
            "AvgDegree",
        ]
    )
    for row in evolution_stats(graph):
        writer.writerow(
            [
                row.season,
                row.nodes_in_season,
                row.edges_in_season,
                row.cumulative_nodes,
                row.cumulative_edges,
                row.new_players,
                row.departed_players,
                f"{row.average_degree:.2f}",
            ]
        )
    return buffer.getvalue()


def export_top_connected(graph: "EvolutionGraph", top_n: int) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Season", "Rank", "PlayerName", "Connections"])
    for row in top_connected(graph, top_n):
        writer.writerow([row.season, row.rank, row.player, row.connections])
    return buffer.getvalue()


def export_roster_changes(graph: "EvolutionGraph") -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Season", "ChangeType", "PlayerName"])
    for change in graph.roster_changes():
        writer.writerow([change.season, change.change_type, change.player])
    return buffer.getvalue()


__all__ = [
    "export_evolution_stats",
    "export_roster_changes",
    "export_top_connected",
]
