"""
Activity record model.

One row per persisted workout. `position` keeps the history order
(0 = most recent); the store rewrites the whole table on save.
"""

from sqlalchemy import Column, String, Integer, Float, BigInteger, JSON

from fittrack.models.base import Base


class ActivityRecordRow(Base):
    """Stored ActivityRecord."""

    __tablename__ = "activity_records"

    row_id = Column(Integer, primary_key=True, autoincrement=True)
    position = Column(Integer, nullable=False, index=True)

    # Record fields
    record_id = Column(BigInteger, nullable=False)
    act_id = Column(String(16), nullable=False)
    date = Column(String(40), nullable=False)  # ISO-8601, offset preserved
    time = Column(String(8), nullable=False)
    duration = Column(Integer, nullable=False)
    distance_m = Column(Integer, nullable=False)
    calories = Column(Integer, nullable=False)
    avg_pace = Column(Float, nullable=True)
    avg_speed_kmh = Column(Float, nullable=False)
    points = Column(JSON, nullable=False, default=list)  # [{lat, lon}, ...]

    def __repr__(self):
        return f"<ActivityRecordRow {self.record_id} ({self.act_id})>"
