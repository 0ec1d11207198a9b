"""Transfermarkt squad-page scraper used to download team-season rosters."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence

import httpx
from bs4 import BeautifulSoup
from bs4.element import Tag
from pydantic import ValidationError

from squadgraph.config import TeamSource
from squadgraph.models import UNKNOWN, PlayerRecord, RosterKey, parse_int_safe

from .codec import save_roster_csv
from .folder import source_identifier


logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7)",
    "Accept-Language": "en-US,en;q=0.9",
}

_AGE_PATTERN = re.compile(r"\((\d+)\)")


class RosterSourceError(RuntimeError):
    """Raised when a squad page cannot be fetched."""


class RosterSource(Protocol):
    def fetch(self, team: TeamSource, season: int) -> List[PlayerRecord]:
        ...


def _clean(text: Optional[str]) -> str:
    if text is None:
        return UNKNOWN
    value = " ".join(text.split())
    return UNKNOWN if not value or value == "-" else value


def _cell_text(cell: Optional[Tag]) -> str:
    return _clean(cell.get_text(" ", strip=True)) if cell is not None else UNKNOWN


def _attr(cell: Optional[Tag], selector: str, attr: str) -> str:
    if cell is None:
        return UNKNOWN
    node = cell.select_one(selector)
    if node is None:
        return UNKNOWN
    value = node.get(attr)
    if isinstance(value, list):
        value = " ".join(value)
    return _clean(value)


def _parse_row(row: Tag) -> Optional[PlayerRecord]:
    cells = row.find_all("td", recursive=False)

    def cell(index: int) -> Optional[Tag]:
        return cells[index] if index < len(cells) else None

    number_node = row.select_one("td.rueckennummer div.rn_nummer")
    name_node = row.select_one("td.posrela td.hauptlink a")
    position_rows = row.select("td.posrela table tr")
    position = _cell_text(position_rows[-1].find("td")) if position_rows else UNKNOWN

    dob_and_age = _cell_text(cell(2))
    date_of_birth = dob_and_age.split("(", 1)[0].strip() if "(" in dob_and_age else dob_and_age
    age_match = _AGE_PATTERN.search(dob_and_age)

    return PlayerRecord(
        number=parse_int_safe(number_node.get_text(strip=True) if number_node else None),
        name=_cell_text(name_node),
        position=position,
        date_of_birth=date_of_birth or UNKNOWN,
        age=int(age_match.group(1)) if age_match else -1,
        nationality=_attr(cell(3), "img", "alt"),
        current_club=_attr(cell(4), "a", "title"),
        height=_cell_text(cell(5)),
        foot=_cell_text(cell(6)),
        joined=_cell_text(cell(7)),
        signed_from=_attr(cell(8), "a", "title"),
        market_value=_cell_text(cell(9)),
    )


def parse_squad_page(html: str) -> List[PlayerRecord]:
    """Extract players from the ``table.items`` squad table of a page."""

    soup = BeautifulSoup(html, "html.parser")
    players: List[PlayerRecord] = []
    for row in soup.select("table.items > tbody > tr"):
        try:
            players.append(_parse_row(row))
        except (ValidationError, ValueError, AttributeError) as exc:
            logger.warning("Error parsing squad table row: %s", exc)
    return players


class TransfermarktSource:
    """Fetch squad pages over HTTP and parse them into player records."""

    def __init__(self, client: Optional[httpx.Client] = None, *, timeout: float = 30.0):
        self._client = client or httpx.Client(
            headers=DEFAULT_HEADERS, timeout=timeout, follow_redirects=True
        )

    def fetch(self, team: TeamSource, season: int) -> List[PlayerRecord]:
        url = team.url_for(season)
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise RosterSourceError(f"Failed to fetch {team.name} {season}: {exc}") from exc
        return parse_squad_page(response.text)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "TransfermarktSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class DownloadReport:
    saved: List[Path] = field(default_factory=list)
    empty: List[RosterKey] = field(default_factory=list)
    failed: List[RosterKey] = field(default_factory=list)


def download_rosters(
    source: RosterSource,
    teams: Iterable[TeamSource],
    seasons: Sequence[int],
    output_dir: Path,
) -> DownloadReport:
    """Save one CSV per team-season; a failing unit never stops the loop."""

    report = DownloadReport()
    output_dir.mkdir(parents=True, exist_ok=True)
    for team in teams:
        for season in seasons:
            key = RosterKey(team.name, season)
            try:
                players = source.fetch(team, season)
            except RosterSourceError as exc:
                logger.error("Error while downloading %s %s: %s", team.name, season, exc)
                report.failed.append(key)
                continue
            if not players:
                logger.info("No squad data available for %s %s", team.name, season)
                report.empty.append(key)
                continue
            path = output_dir / f"{source_identifier(team.name, season)}.csv"
            try:
                save_roster_csv(players, path)
            except OSError as exc:
                logger.error("Error while saving %s: %s", path.name, exc)
                report.failed.append(key)
                continue
            logger.info("Saved %s (%d players)", path.name, len(players))
            report.saved.append(path)
    return report


__all__ = [
    "DownloadReport",
    "RosterSource",
    "RosterSourceError",
    "TransfermarktSource",
    "download_rosters",
    "parse_squad_page",
]
