"""
History Store

Persists the ordered (most-recent-first) list of ActivityRecords.

Contract for every backing:
- load() never raises: missing or corrupt data reads as empty history
- save() replaces the whole sequence; write failures are logged and
  swallowed so a finished workout never crashes the app

Backings:
- InMemoryHistoryStore: tests and the "memory" backend
- JsonFileHistoryStore: single JSON document on disk
- SqlHistoryStore: SQLAlchemy table (durable production storage)
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .models import ActivityRecordRow
from .schemas import ActivityHistory, ActivityRecord

logger = logging.getLogger(__name__)


class HistoryStore(ABC):
    """Abstract history persistence."""

    @abstractmethod
    def load(self) -> List[ActivityRecord]:
        """All records, most recent first. Empty on absence or corruption."""

    @abstractmethod
    def save(self, records: Sequence[ActivityRecord]) -> None:
        """Persist full replacement sequence (best effort)."""

    def add(self, record: ActivityRecord) -> List[ActivityRecord]:
        """Prepend record to history and persist. Returns new history."""
        history = [record, *self.load()]
        self.save(history)
        return history

    def get(self, record_id: int) -> Optional[ActivityRecord]:
        for record in self.load():
            if record.id == record_id:
                return record
        return None

    def clear(self) -> None:
        self.save([])


class InMemoryHistoryStore(HistoryStore):
    """
    Keeps serialized history in memory.

    Records are stored as JSON bytes, like the durable backings,
    so load() always returns fresh objects.
    """

    def __init__(self, records: Sequence[ActivityRecord] = ()):
        self._data: bytes = ActivityHistory.dump_json(list(records), by_alias=True)

    def load(self) -> List[ActivityRecord]:
        try:
            return ActivityHistory.validate_json(self._data)
        except ValidationError as e:
            logger.warning(f"In-memory history unreadable, using empty history: {e}")
            return []

    def save(self, records: Sequence[ActivityRecord]) -> None:
        self._data = ActivityHistory.dump_json(list(records), by_alias=True)


class JsonFileHistoryStore(HistoryStore):
    """History as one JSON array in a file."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> List[ActivityRecord]:
        try:
            return ActivityHistory.validate_json(self.path.read_bytes())
        except FileNotFoundError:
            return []
        except (OSError, ValidationError) as e:
            logger.warning(f"Cannot read history from {self.path}, using empty history: {e}")
            return []

    def save(self, records: Sequence[ActivityRecord]) -> None:
        data = ActivityHistory.dump_json(list(records), by_alias=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(data)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Cannot write history to {self.path}: {e}")
            return

        logger.debug(f"Saved {len(records)} records to {self.path}")


class SqlHistoryStore(HistoryStore):
    """History in the activity_records table."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def load(self) -> List[ActivityRecord]:
        # Corrupt JSON columns raise ValueError (JSONDecodeError or ValidationError)
        try:
            with self.session_factory() as db:
                rows = db.execute(
                    select(ActivityRecordRow).order_by(ActivityRecordRow.position)
                ).scalars().all()
                return [self._to_record(row) for row in rows]
        except (SQLAlchemyError, ValueError) as e:
            logger.warning(f"Cannot read history from database, using empty history: {e}")
            return []

    def save(self, records: Sequence[ActivityRecord]) -> None:
        with self.session_factory() as db:
            try:
                db.execute(delete(ActivityRecordRow))
                db.add_all(
                    self._to_row(position, record)
                    for position, record in enumerate(records)
                )
                db.commit()
            except SQLAlchemyError as e:
                db.rollback()
                logger.warning(f"Cannot write history to database: {e}")

    @staticmethod
    def _to_row(position: int, record: ActivityRecord) -> ActivityRecordRow:
        data = record.to_json_dict()
        return ActivityRecordRow(
            position=position,
            record_id=data["id"],
            act_id=data["actId"],
            date=data["date"],
            time=data["time"],
            duration=data["duration"],
            distance_m=data["distanceM"],
            calories=data["calories"],
            avg_pace=data["avgPace"],
            avg_speed_kmh=data["avgSpeedKmh"],
            points=data["points"],
        )

    @staticmethod
    def _to_record(row: ActivityRecordRow) -> ActivityRecord:
        return ActivityRecord.model_validate({
            "id": row.record_id,
            "actId": row.act_id,
            "date": row.date,
            "time": row.time,
            "duration": row.duration,
            "distanceM": row.distance_m,
            "calories": row.calories,
            "avgPace": row.avg_pace,
            "avgSpeedKmh": row.avg_speed_kmh,
            "points": row.points or [],
        })


def create_history_store(
    backend: str,
    history_path: Path | str | None = None,
    database_url: str | None = None,
) -> HistoryStore:
    """
    Build store for configured backend.

    Args:
        backend: "memory", "json" or "sql"
        history_path: JSON file (json backend)
        database_url: Database URL (sql backend)
    """
    if backend == "memory":
        return InMemoryHistoryStore()

    if backend == "json":
        if history_path is None:
            raise ValueError("json history backend requires history_path")
        return JsonFileHistoryStore(history_path)

    if backend == "sql":
        if database_url is None:
            raise ValueError("sql history backend requires database_url")
        from fittrack.db.session import create_db_engine, create_session_factory, init_db

        engine = create_db_engine(database_url)
        init_db(engine)
        return SqlHistoryStore(create_session_factory(engine))

    raise ValueError(f"Unknown history backend: {backend}")
