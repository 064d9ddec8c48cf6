"""Load compensation CSVs and serve them as an immutable lookup index."""

from __future__ import annotations

import csv
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import ValidationError

from nbavalue.models import CompensationRecord


logger = logging.getLogger(__name__)

CONTRACT_COLUMNS: Tuple[str, ...] = ("player_id", "player_name", "season", "salary")


class CompensationFormatError(ValueError):
    """Raised when a compensation row is structurally invalid."""

    def __init__(self, path: Path, line: int, message: str):
        super().__init__(f"{path}:{line}: {message}")
        self.path = path
        self.line = line


def _parse_row(path: Path, line: int, row: Sequence[str]) -> CompensationRecord:
    values = [cell.strip() for cell in row]
    if len(values) < len(CONTRACT_COLUMNS):
        raise CompensationFormatError(
            path, line, f"expected {len(CONTRACT_COLUMNS)} fields, got {len(values)}"
        )
    player_id, player_name, season, raw_salary = values[: len(CONTRACT_COLUMNS)]
    for column, value in zip(CONTRACT_COLUMNS, (player_id, player_name, season, raw_salary)):
        if not value:
            raise CompensationFormatError(path, line, f"missing {column}")
    try:
        salary = int(raw_salary)
    except ValueError:
        raise CompensationFormatError(path, line, f"salary {raw_salary!r} is not a whole number") from None
    try:
        return CompensationRecord(
            player_id=player_id,
            player_name=player_name,
            season=season,
            salary=salary,
        )
    except ValidationError as exc:
        raise CompensationFormatError(path, line, str(exc)) from exc


def load_compensation_csv(path: Path) -> List[CompensationRecord]:
    """Parse ``player_id,player_name,season,salary`` rows after a header line.

    A missing file yields an empty list; a malformed row raises
    :class:`CompensationFormatError`.
    """

    if not path.exists():
        logger.warning("Compensation file not found at %s", path)
        return []

    records: List[CompensationRecord] = []
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        next(reader, None)
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            records.append(_parse_row(path, reader.line_num, row))
    logger.info("Loaded %s compensation records from %s", len(records), path)
    return records


@dataclass(frozen=True)
class _Snapshot:
    by_key: Mapping[Tuple[str, str], CompensationRecord]
    by_season: Mapping[str, Tuple[CompensationRecord, ...]]

    @classmethod
    def build(cls, records: Iterable[CompensationRecord]) -> "_Snapshot":
        by_key: dict[Tuple[str, str], CompensationRecord] = {}
        by_season: dict[str, list[CompensationRecord]] = {}
        duplicates = 0
        for record in records:
            if record.key in by_key:
                duplicates += 1
                continue
            by_key[record.key] = record
            by_season.setdefault(record.season, []).append(record)
        if duplicates:
            logger.debug("Ignored %s duplicate compensation records", duplicates)
        return cls(
            by_key=MappingProxyType(by_key),
            by_season=MappingProxyType({season: tuple(rows) for season, rows in by_season.items()}),
        )


class CompensationIndex:
    """Lazily built, read-only view of compensation keyed by (player, season).

    Readers grab the current snapshot reference without locking. ``reload``
    builds a replacement snapshot and swaps it in whole; ``invalidate`` drops
    it so the next read rebuilds.
    """

    def __init__(self, loader: Callable[[], Iterable[CompensationRecord]]):
        self._loader = loader
        self._snapshot: Optional[_Snapshot] = None
        self._lock = threading.Lock()

    @classmethod
    def from_csv(cls, path: Path) -> "CompensationIndex":
        return cls(lambda: load_compensation_csv(path))

    @classmethod
    def from_records(cls, records: Iterable[CompensationRecord]) -> "CompensationIndex":
        frozen = tuple(records)
        return cls(lambda: frozen)

    def _current(self) -> _Snapshot:
        snapshot = self._snapshot
        if snapshot is not None:
            return snapshot
        with self._lock:
            if self._snapshot is None:
                self._snapshot = _Snapshot.build(self._loader())
            return self._snapshot

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    def reload(self) -> int:
        """Rebuild from the loader and publish the new snapshot atomically."""

        snapshot = _Snapshot.build(self._loader())
        with self._lock:
            self._snapshot = snapshot
        logger.info("Compensation index reloaded with %s records", len(snapshot.by_key))
        return len(snapshot.by_key)

    def invalidate(self) -> None:
        with self._lock:
            self._snapshot = None

    def get(self, player_id: str, season: str) -> Optional[CompensationRecord]:
        return self._current().by_key.get((player_id, season))

    def for_season(self, season: str) -> Tuple[CompensationRecord, ...]:
        return self._current().by_season.get(season, ())

    def __len__(self) -> int:
        return len(self._current().by_key)
