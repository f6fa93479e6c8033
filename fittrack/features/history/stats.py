"""
History statistics.

Totals over all recorded workouts, per-activity breakdown and
the single longest workout.
"""

from typing import Sequence

from fittrack.shared.constants import ACTIVITIES

from .schemas import ActivityRecord, ActivityTotals, HistoryStats


def calculate_history_stats(history: Sequence[ActivityRecord]) -> HistoryStats:
    """
    Aggregate history.

    Per-activity rows follow catalog order and only include activities
    with at least one record. On equal distances the earlier record in
    history (more recent) wins "best".
    """
    if not history:
        return HistoryStats()

    by_activity = []
    for info in ACTIVITIES:
        records = [r for r in history if r.activity == info.type]
        if not records:
            continue
        by_activity.append(ActivityTotals(
            activity=info.type,
            label=info.label,
            count=len(records),
            distance_km=sum(r.distance_m for r in records) / 1000,
        ))

    best = None
    for record in history:
        if best is None or record.distance_m > best.distance_m:
            best = record

    return HistoryStats(
        count=len(history),
        distance_km=sum(r.distance_m for r in history) / 1000,
        duration_sec=sum(r.duration for r in history),
        calories=sum(r.calories for r in history),
        by_activity=by_activity,
        best=best,
    )
