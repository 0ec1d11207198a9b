from pathlib import Path

import httpx
import pytest

from squadgraph.config import TeamSource, get_team
from squadgraph.ingest import (
    RosterSourceError,
    TransfermarktSource,
    download_rosters,
    load_roster_csv,
    parse_squad_page,
)
from squadgraph.models import UNKNOWN, PlayerRecord, RosterKey


def _player_row(number: str, name: str, position: str, dob: str, nation: str, club: str, signed: str) -> str:
    return f"""
    <tr class="odd">
      <td class="zentriert rueckennummer"><div class="rn_nummer">{number}</div></td>
      <td class="posrela">
        <table class="inline-table">
          <tr><td rowspan="2"><img src="x.png"></td><td class="hauptlink"><a href="/p">{name}</a></td></tr>
          <tr><td>{position}</td></tr>
        </table>
      </td>
      <td class="zentriert">{dob}</td>
      <td class="zentriert"><img alt="{nation}" title="{nation}"></td>
      <td class="zentriert"><a title="{club}" href="/c"><img></a></td>
      <td class="zentriert">1,85m</td>
      <td class="zentriert">right</td>
      <td class="zentriert">Jul 1, 2019</td>
      <td class="zentriert"><a title="{signed}" href="/s"><img></a></td>
      <td class="rechts hauptlink">€10.00m</td>
    </tr>
    """


SQUAD_ROWS = "".join(
    [
        _player_row("1", "Wojciech Szczesny", "Goalkeeper", "Apr 18, 1990 (30)", "Poland", "Juventus FC", "Arsenal FC"),
        _player_row("-", "Young Talent", "Left Winger", "Mar 3, 2004 (16)", "Italy", "AS Roma", "-"),
        '<tr class="even"><td class="zentriert">-</td></tr>',
    ]
)

SQUAD_PAGE = (
    '<html><body><table class="items"><thead><tr><th>#</th></tr></thead>'
    f"<tbody>{SQUAD_ROWS}</tbody></table></body></html>"
)


def test_parse_squad_page_extracts_players(caplog):
    players = parse_squad_page(SQUAD_PAGE)

    assert [player.name for player in players] == ["Wojciech Szczesny", "Young Talent"]
    keeper = players[0]
    assert keeper.number == 1
    assert keeper.position == "Goalkeeper"
    assert keeper.date_of_birth == "Apr 18, 1990"
    assert keeper.age == 30
    assert keeper.nationality == "Poland"
    assert keeper.current_club == "Juventus FC"
    assert keeper.height == "1,85m"
    assert keeper.foot == "right"
    assert keeper.joined == "Jul 1, 2019"
    assert keeper.signed_from == "Arsenal FC"
    assert keeper.market_value == "€10.00m"

    talent = players[1]
    assert talent.number == -1
    assert talent.signed_from == UNKNOWN
    assert "Error parsing squad table row" in caplog.text


def test_parse_squad_page_without_table():
    assert parse_squad_page("<html><body><p>Not found</p></body></html>") == []


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_transfermarkt_source_fetches_season_url():
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, text=SQUAD_PAGE)

    with TransfermarktSource(_client(handler)) as source:
        players = source.fetch(get_team("AS Roma"), 2020)

    assert len(players) == 2
    assert seen == [get_team("AS Roma").url_for(2020)]


def test_transfermarkt_source_wraps_http_errors():
    source = TransfermarktSource(_client(lambda request: httpx.Response(503)))
    with pytest.raises(RosterSourceError):
        source.fetch(get_team("AC Milan"), 2020)


class _FakeSource:
    def __init__(self) -> None:
        self.calls: list[tuple[str, int]] = []

    def fetch(self, team: TeamSource, season: int) -> list[PlayerRecord]:
        self.calls.append((team.name, season))
        if season == 2020:
            raise RosterSourceError("boom")
        if team.name == "AS Roma":
            return []
        return [PlayerRecord(name=f"{team.name} Keeper"), PlayerRecord(name="Shared Player")]


def test_download_rosters_continues_after_failures(tmp_path: Path, caplog):
    source = _FakeSource()
    teams = [get_team("AC Milan"), get_team("AS Roma")]

    report = download_rosters(source, teams, [2019, 2020, 2021], tmp_path)

    assert len(source.calls) == 6
    assert [path.name for path in report.saved] == ["AC_Milan_2019.csv", "AC_Milan_2021.csv"]
    assert report.failed == [RosterKey("AC Milan", 2020), RosterKey("AS Roma", 2020)]
    assert report.empty == [RosterKey("AS Roma", 2019), RosterKey("AS Roma", 2021)]
    assert [p.name for p in load_roster_csv(tmp_path / "AC_Milan_2019.csv")] == [
        "AC Milan Keeper",
        "Shared Player",
    ]
    assert "boom" in caplog.text


def test_download_rosters_records_unwritable_output(tmp_path: Path, caplog):
    source = _FakeSource()
    (tmp_path / "AC_Milan_2019.csv").mkdir()

    report = download_rosters(source, [get_team("AC Milan")], [2019, 2020, 2021], tmp_path)

    assert len(source.calls) == 3
    assert [path.name for path in report.saved] == ["AC_Milan_2021.csv"]
    assert report.failed == [RosterKey("AC Milan", 2019), RosterKey("AC Milan", 2020)]
    assert "Error while saving AC_Milan_2019.csv" in caplog.text
