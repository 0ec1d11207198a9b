from pathlib import Path

from squadgraph import cli
from squadgraph.config_loader import Settings
from squadgraph.ingest import DownloadReport, save_roster_csv
from squadgraph.models import PlayerRecord


def _seed(folder: Path) -> None:
    save_roster_csv([PlayerRecord(name="Alice"), PlayerRecord(name="Bob")], folder / "AC_Milan_2020.csv")
    save_roster_csv(
        [PlayerRecord(name="Alice"), PlayerRecord(name="Bob"), PlayerRecord(name="Carol")],
        folder / "AC_Milan_2021.csv",
    )


def test_summary_prints_table(tmp_path: Path, capsys):
    _seed(tmp_path)

    assert cli.main(["--data-dir", str(tmp_path), "summary"]) == 0

    out = capsys.readouterr().out
    assert "Loaded 2 team-season files" in out
    assert "Graph evolution summary" in out
    assert "Most connected player overall: Alice (2 unique teammates)" in out


def test_summary_without_data_returns_error(tmp_path: Path, capsys):
    assert cli.main(["--data-dir", str(tmp_path), "summary"]) == 1
    assert "No data found!" in capsys.readouterr().out


def test_export_writes_csv_files(tmp_path: Path):
    data_dir = tmp_path / "teams"
    data_dir.mkdir()
    _seed(data_dir)
    output_dir = tmp_path / "out"

    code = cli.main(["--data-dir", str(data_dir), "export", "--output-dir", str(output_dir), "--top", "1"])

    assert code == 0
    assert (output_dir / "evolution_stats.csv").read_text(encoding="utf-8").splitlines()[1] == (
        "2020,2,1,2,1,2,0,1.00"
    )
    assert (output_dir / "top_players.csv").read_text(encoding="utf-8").splitlines()[1:] == [
        "2020,1,Alice,1",
        "2021,1,Alice,2",
    ]
    assert "2021,JOINED,Carol" in (output_dir / "roster_changes.csv").read_text(encoding="utf-8")


def test_download_rejects_unknown_team(tmp_path: Path, capsys):
    assert cli.main(["--data-dir", str(tmp_path), "download", "--teams", "Nowhere FC"]) == 2
    assert "Nowhere FC" in capsys.readouterr().out


class _NullSource:
    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return None


def test_download_uses_configured_season_range(tmp_path: Path, monkeypatch):
    calls = []

    def fake_download(source, teams, seasons, output_dir):
        calls.append(([team.name for team in teams], list(seasons), output_dir))
        return DownloadReport()

    monkeypatch.setattr(cli, "TransfermarktSource", _NullSource)
    monkeypatch.setattr(cli, "download_rosters", fake_download)
    config = tmp_path / "settings.json"
    Settings(data_dir=tmp_path, start_season=2010, end_season=2012, teams=["AS Roma"]).save(config)

    assert cli.main(["--config", str(config), "download"]) == 0
    assert cli.main(["--config", str(config), "download", "--end", "2011"]) == 0

    assert calls == [
        (["AS Roma"], [2010, 2011, 2012], tmp_path),
        (["AS Roma"], [2010, 2011], tmp_path),
    ]


def test_settings_round_trip(tmp_path: Path):
    path = tmp_path / "settings.json"
    Settings(data_dir=tmp_path / "teams", start_season=2010, end_season=2012, teams=["AS Roma"]).save(path)

    loaded = Settings.load(path)

    assert loaded.data_dir == tmp_path / "teams"
    assert list(loaded.seasons) == [2010, 2011, 2012]
    assert loaded.teams == ["AS Roma"]


def test_settings_from_env_overrides_data_dir(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("SQUADGRAPH_DATA_DIR", str(tmp_path))
    assert Settings.from_env().data_dir == tmp_path
