"""Helpers to read and write team-season roster CSVs."""

from __future__ import annotations

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from squadgraph.models import UNKNOWN, PlayerRecord, parse_int_safe


logger = logging.getLogger(__name__)

ROSTER_COLUMNS: tuple[str, ...] = (
    "Number",
    "Name",
    "Position",
    "DateOfBirth",
    "Age",
    "Nationality",
    "CurrentClub",
    "Height",
    "Foot",
    "Joined",
    "SignedFrom",
    "MarketValue",
)

# Column index -> PlayerRecord field, in file order.
_FIELDS: tuple[str, ...] = (
    "number",
    "name",
    "position",
    "date_of_birth",
    "age",
    "nationality",
    "current_club",
    "height",
    "foot",
    "joined",
    "signed_from",
    "market_value",
)
_NUMERIC_FIELDS = {"number", "age"}


def _text(value: object) -> str:
    if value is None:
        return UNKNOWN
    text = str(value).strip()
    return text or UNKNOWN


def row_to_record(row: Sequence[str]) -> Optional[PlayerRecord]:
    """Convert one CSV row to a record, or ``None`` when it has no usable name."""

    cells = [cell.strip() for cell in row]
    if len(cells) < 2:
        return None
    name = cells[1]
    if not name or name == UNKNOWN:
        return None

    data: dict[str, object] = {}
    for index, field in enumerate(_FIELDS):
        raw = cells[index] if index < len(cells) else None
        if field in _NUMERIC_FIELDS:
            data[field] = parse_int_safe(raw)
        else:
            data[field] = raw if raw is not None else UNKNOWN
    try:
        return PlayerRecord(**data)
    except ValidationError as exc:
        logger.debug("Unable to build player from row %r: %s", row, exc)
        return None


def record_to_row(record: PlayerRecord) -> List[str]:
    row: List[str] = []
    for field in _FIELDS:
        value = getattr(record, field)
        row.append(str(value) if field in _NUMERIC_FIELDS else _text(value))
    return row


def parse_roster_csv(text: str, *, source: str = "<string>") -> List[PlayerRecord]:
    reader = csv.reader(StringIO(text))
    records: List[PlayerRecord] = []
    for line_number, row in enumerate(reader, start=1):
        if line_number == 1 or not row:
            continue
        record = row_to_record(row)
        if record is None:
            logger.warning("Skipping row %d in %s: missing player name", line_number, source)
            continue
        records.append(record)
    return records


def load_roster_csv(path: Path) -> List[PlayerRecord]:
    with path.open(newline="", encoding="utf-8") as f:
        return parse_roster_csv(f.read(), source=path.name)


def write_roster_csv(players: Sequence[PlayerRecord]) -> str:
    """Serialize ``players`` with the fixed roster header."""

    buffer = StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(ROSTER_COLUMNS)
    for record in players:
        writer.writerow(record_to_row(record))
    return buffer.getvalue()


def save_roster_csv(players: Sequence[PlayerRecord], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(write_roster_csv(players), encoding="utf-8")


__all__ = [
    "ROSTER_COLUMNS",
    "load_roster_csv",
    "parse_int_safe",
    "parse_roster_csv",
    "record_to_row",
    "row_to_record",
    "save_roster_csv",
    "write_roster_csv",
]
