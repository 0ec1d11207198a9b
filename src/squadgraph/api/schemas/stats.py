from __future__ import annotations

from pydantic import BaseModel, Field


class SeasonStatsResponse(BaseModel):
    season: int
    nodes_in_season: int
    edges_in_season: int
    cumulative_nodes: int
    cumulative_edges: int
    new_players: int
    departed_players: int
    average_degree: float


class EvolutionStatsResponse(BaseModel):
    seasons: list[SeasonStatsResponse] = Field(default_factory=list)
    most_connected: str | None = None
    most_connected_teammates: int = 0
