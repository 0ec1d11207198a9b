"""Persist and load run settings."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Optional

from squadgraph.config import iter_teams

DATA_DIR_ENV = "SQUADGRAPH_DATA_DIR"


def _default_teams() -> List[str]:
    return [source.name for source in iter_teams()]


@dataclass
class Settings:
    data_dir: Path = Path("data/teams")
    output_dir: Path = Path("data/output")
    start_season: int = 1999
    end_season: int = 2025
    teams: List[str] = field(default_factory=_default_teams)
    max_nodes: int = 50
    min_weight: int = 1

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)
        self.output_dir = Path(self.output_dir)
        if self.end_season < self.start_season:
            raise ValueError(
                f"end_season {self.end_season} is before start_season {self.start_season}"
            )
        if self.min_weight < 1:
            raise ValueError("min_weight must be at least 1")

    @property
    def seasons(self) -> range:
        return range(self.start_season, self.end_season + 1)

    @classmethod
    def load(cls, path: Path) -> "Settings":
        data = json.loads(path.read_text(encoding="utf-8"))
        known = {key: value for key, value in data.items() if key in cls.__dataclass_fields__}
        return cls(**known)

    @classmethod
    def from_env(cls, path: Optional[Path] = None) -> "Settings":
        settings = cls.load(path) if path else cls()
        env_dir = os.getenv(DATA_DIR_ENV)
        if env_dir:
            settings.data_dir = Path(env_dir)
        return settings

    def save(self, path: Path) -> None:
        payload = asdict(self)
        payload["data_dir"] = str(self.data_dir)
        payload["output_dir"] = str(self.output_dir)
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
