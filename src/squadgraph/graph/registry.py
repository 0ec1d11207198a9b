"""Latest known attributes for each player name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from squadgraph.models import PlayerRecord


class PlayerRegistry:
    """Keeps one :class:`PlayerRecord` per name.

    A sighting replaces the stored attributes unless the stored ones come
    from a later season, so rosters ingested out of chronological order
    still leave the most recent season's attributes in place. Sightings
    from the same season are last-write-wins.
    """

    def __init__(self) -> None:
        self._records: Dict[str, Tuple[int, PlayerRecord]] = {}

    def upsert(self, record: PlayerRecord, season: int) -> bool:
        """Store ``record`` seen in ``season``; return whether it was applied."""

        current = self._records.get(record.name)
        if current is not None and current[0] > season:
            return False
        self._records[record.name] = (season, record)
        return True

    def get(self, name: str) -> Optional[PlayerRecord]:
        entry = self._records.get(name)
        return entry[1] if entry else None

    def last_seen(self, name: str) -> Optional[int]:
        entry = self._records.get(name)
        return entry[0] if entry else None

    def as_mapping(self) -> Mapping[str, PlayerRecord]:
        return MappingProxyType({name: record for name, (_, record) in self._records.items()})

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


__all__ = ["PlayerRegistry"]
