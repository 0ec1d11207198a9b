"""Bootstrap an :class:`EvolutionGraphBuilder` from a folder of roster CSVs."""

from __future__ import annotations

import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, Tuple

from squadgraph.models import RosterKey

from .codec import load_roster_csv

if TYPE_CHECKING:
    from squadgraph.graph import EvolutionGraphBuilder


logger = logging.getLogger(__name__)

_IDENTIFIER_PATTERN = re.compile(r"(.+)_(\d{4})$")


@dataclass
class LoadReport:
    loaded: List[RosterKey] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    players_ingested: int = 0


def parse_source_identifier(identifier: str) -> Optional[RosterKey]:
    """Split ``Team_Name_2020`` (or ``Team_Name_2020.csv``) into a roster key."""

    stem = identifier[:-4] if identifier.lower().endswith(".csv") else identifier
    match = _IDENTIFIER_PATTERN.match(stem)
    if not match:
        return None
    team = match.group(1).replace("_", " ").strip()
    if not team:
        return None
    return RosterKey(team, int(match.group(2)))


def source_identifier(team: str, season: int) -> str:
    return f"{team.replace(' ', '_')}_{season:04d}"


def load_folder(builder: "EvolutionGraphBuilder", folder: Path) -> LoadReport:
    """Ingest every ``<Team>_<YYYY>.csv`` in ``folder``, oldest season first."""

    report = LoadReport()
    if not folder.is_dir():
        logger.error("Invalid roster folder: %s", folder)
        return report

    files = sorted(folder.glob("*.csv"))
    if not files:
        logger.warning("No CSV files found in %s", folder)
        return report

    queue: List[Tuple[RosterKey, Path]] = []
    for path in files:
        key = parse_source_identifier(path.name)
        if key is None:
            logger.warning("Cannot parse team and season from file name: %s", path.name)
            report.skipped.append(path.name)
            continue
        queue.append((key, path))

    queue.sort(key=lambda item: (item[0].season, item[0].team))
    logger.info("Loading %d team-season files from %s", len(queue), folder)
    for key, path in queue:
        try:
            players = load_roster_csv(path)
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            logger.error("Error reading %s: %s", path.name, exc)
            report.failed.append(path.name)
            continue
        report.players_ingested += builder.ingest(key.team, key.season, players)
        report.loaded.append(key)
    return report


__all__ = ["LoadReport", "load_folder", "parse_source_identifier", "source_identifier"]
