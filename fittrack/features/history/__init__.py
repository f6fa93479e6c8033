"""
Workout history module.

Usage:
    from fittrack.features.history import ActivityRecord, JsonFileHistoryStore
    from fittrack.features.history import build_activity_record

Components:
- ActivityRecord: Pydantic schema of a persisted workout (camelCase JSON)
- ActivityRecordRow: SQLAlchemy model for the sql backend
- HistoryStore + InMemory/JsonFile/Sql backings
- build_activity_record: Freeze finished workout into a record
- calculate_history_stats: Totals, per-activity breakdown, best workout
"""

from .schemas import ActivityRecord, ActivityHistory, ActivityTotals, HistoryStats
from .models import ActivityRecordRow
from .store import (
    HistoryStore,
    InMemoryHistoryStore,
    JsonFileHistoryStore,
    SqlHistoryStore,
    create_history_store,
)
from .assembly import build_activity_record
from .stats import calculate_history_stats

__all__ = [
    # Schemas
    "ActivityRecord",
    "ActivityHistory",
    "ActivityTotals",
    "HistoryStats",
    # Model
    "ActivityRecordRow",
    # Stores
    "HistoryStore",
    "InMemoryHistoryStore",
    "JsonFileHistoryStore",
    "SqlHistoryStore",
    "create_history_store",
    # Services
    "build_activity_record",
    "calculate_history_stats",
]
