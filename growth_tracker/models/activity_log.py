# models/activity_log.py

from datetime import datetime, timezone
from sqlalchemy import (
    Column, Date, DateTime, ForeignKey, Integer, String, Text,
    CheckConstraint, UniqueConstraint,
)
from sqlalchemy.orm import relationship
from growth_tracker.core.config import Base
from growth_tracker.data.activities import QUARTERS_PER_HOUR


class ActivityLog(Base):
    """
    Hours spent on one activity on one calendar day.
    At most one row per (user, activity, date); re-logging overwrites.
    """

    __tablename__ = "activity_logs"
    __table_args__ = (
        UniqueConstraint("user_id", "name", "date", name="uq_activity_logs_user_name_date"),
        CheckConstraint(
            "quarter_hours >= 0 AND quarter_hours <= 96",
            name="ck_activity_logs_quarter_hours_range",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    name = Column(String(50), nullable=False)

    # Fixed-point hours: 1 unit = 15 minutes
    quarter_hours = Column(Integer, nullable=False, default=0)
    note = Column(Text, nullable=True)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    user = relationship("User", back_populates="activity_logs")

    @property
    def hours(self) -> float:
        return self.quarter_hours / QUARTERS_PER_HOUR
