from __future__ import annotations

from pydantic import BaseModel

from squadgraph.models import PlayerRecord


class PlayerResponse(BaseModel):
    player: PlayerRecord
    seasons: list[int]
    teams: list[str]
