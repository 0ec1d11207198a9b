"""Squad-page sources for the supported clubs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping


@dataclass(frozen=True)
class TeamSource:
    name: str
    url_template: str

    def url_for(self, season: int) -> str:
        """Squad page for ``season``; the season id is appended to the template."""

        return f"{self.url_template}{season}"


_TRANSFERMARKT = "https://www.transfermarkt.com"

_TEAM_SOURCES: Dict[str, TeamSource] = {
    source.name.upper(): source
    for source in (
        TeamSource(
            name="Legia Warszawa",
            url_template=f"{_TRANSFERMARKT}/legia-warszawa/kader/verein/255/plus/1/galerie/0?saison_id=",
        ),
        TeamSource(
            name="Bayern Munich",
            url_template=f"{_TRANSFERMARKT}/fc-bayern-munich/kader/verein/27/plus/1/galerie/0?saison_id=",
        ),
        TeamSource(
            name="AC Milan",
            url_template=f"{_TRANSFERMARKT}/ac-milan/kader/verein/5/plus/1/galerie/0?saison_id=",
        ),
        TeamSource(
            name="AS Roma",
            url_template=f"{_TRANSFERMARKT}/as-roma/kader/verein/12/plus/1/galerie/0?saison_id=",
        ),
    )
}


def iter_teams() -> Iterable[TeamSource]:
    """Return an iterator of all configured team sources."""

    return _TEAM_SOURCES.values()


def get_team(name: str) -> TeamSource:
    """Fetch a team source by name (case-insensitive), raising KeyError if missing."""

    key = name.strip().upper()
    if key not in _TEAM_SOURCES:
        raise KeyError(f"No squad source configured for team={name!r}")
    return _TEAM_SOURCES[key]


# Read-only view keyed by display name.
TEAM_CONFIG: Mapping[str, TeamSource] = {source.name: source for source in _TEAM_SOURCES.values()}
