from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GraphNodeResponse(BaseModel):
    name: str
    degree: int = Field(..., ge=0)
    is_new: bool = False
    is_departing: bool = False


class GraphEdgeResponse(BaseModel):
    source: str
    target: str
    weight: int = Field(..., ge=1)


class SeasonGraphResponse(BaseModel):
    season: int
    mode: Literal["snapshot", "cumulative"]
    team: str | None = None
    node_count: int
    edge_count: int
    nodes: list[GraphNodeResponse]
    edges: list[GraphEdgeResponse]


class SeasonsResponse(BaseModel):
    has_data: bool
    seasons: list[int]
    teams: list[str]


class ChurnResponse(BaseModel):
    season: int
    active: int
    new_players: list[str]
    departed_players: list[str]
