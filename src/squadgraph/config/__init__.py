"""Configuration helpers for squad sources."""

from .teams import TEAM_CONFIG, TeamSource, get_team, iter_teams

__all__ = [
    "TEAM_CONFIG",
    "TeamSource",
    "get_team",
    "iter_teams",
]
