"""Pydantic models for API I/O."""

from .graph import (
    ChurnResponse,
    GraphEdgeResponse,
    GraphNodeResponse,
    SeasonGraphResponse,
    SeasonsResponse,
)
from .player import PlayerResponse
from .stats import EvolutionStatsResponse, SeasonStatsResponse

__all__ = [
    "ChurnResponse",
    "EvolutionStatsResponse",
    "GraphEdgeResponse",
    "GraphNodeResponse",
    "PlayerResponse",
    "SeasonGraphResponse",
    "SeasonStatsResponse",
    "SeasonsResponse",
]
