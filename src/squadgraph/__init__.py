"""Temporal co-play graphs built from team-season rosters."""

from squadgraph.graph import EvolutionGraph, EvolutionGraphBuilder
from squadgraph.models import PlayerRecord

__all__ = ["EvolutionGraph", "EvolutionGraphBuilder", "PlayerRecord"]
