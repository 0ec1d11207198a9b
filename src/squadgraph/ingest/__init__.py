"""Input adapters: roster CSV codec, folder bootstrap and squad-page scraper."""

from .codec import (
    ROSTER_COLUMNS,
    load_roster_csv,
    parse_int_safe,
    parse_roster_csv,
    save_roster_csv,
    write_roster_csv,
)
from .folder import LoadReport, load_folder, parse_source_identifier, source_identifier
from .transfermarkt import (
    DownloadReport,
    RosterSource,
    RosterSourceError,
    TransfermarktSource,
    download_rosters,
    parse_squad_page,
)

__all__ = [
    "DownloadReport",
    "LoadReport",
    "ROSTER_COLUMNS",
    "RosterSource",
    "RosterSourceError",
    "TransfermarktSource",
    "download_rosters",
    "load_folder",
    "load_roster_csv",
    "parse_int_safe",
    "parse_roster_csv",
    "parse_source_identifier",
    "parse_squad_page",
    "save_roster_csv",
    "source_identifier",
    "write_roster_csv",
]
