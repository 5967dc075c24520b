# crud/activity_log.py
from datetime import date, datetime, timezone
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from growth_tracker.crud.upsert import upsert
from growth_tracker.data.activities import MAX_QUARTER_HOURS
from growth_tracker.models.activity_log import ActivityLog


class CRUDActivityLog:
    """CRUD operations for ActivityLog model."""

    # =====================================================================
    # WRITE OPERATIONS
    # =====================================================================

    def upsert(
        self,
        db: Session,
        *,
        user_id: int,
        name: str,
        day: date,
        quarter_hours: int,
        note: Optional[str] = None,
    ) -> ActivityLog:
        """
        Insert or overwrite the row for (user_id, name, day).

        Expects already validated values; the caller commits.
        """
        now = datetime.now(timezone.utc)
        return upsert(
            db,
            ActivityLog,
            values={
                "user_id": user_id,
                "name": name,
                "date": day,
                "quarter_hours": quarter_hours,
                "note": note,
                "created_at": now,
                "updated_at": now,
            },
            index_elements=["user_id", "name", "date"],
            update_fields=["quarter_hours", "note", "updated_at"],
        )

    # =====================================================================
    # READ OPERATIONS
    # =====================================================================

    def get(
        self, db: Session, *, user_id: int, name: str, day: date
    ) -> Optional[ActivityLog]:
        return db.scalars(
            select(ActivityLog).where(
                ActivityLog.user_id == user_id,
                ActivityLog.name == name,
                ActivityLog.date == day,
            )
        ).first()

    def get_range(
        self, db: Session, *, user_id: int, start_date: date, end_date: date
    ) -> List[ActivityLog]:
        """All rows for the user between start_date and end_date inclusive."""
        return list(
            db.scalars(
                select(ActivityLog)
                .where(
                    ActivityLog.user_id == user_id,
                    ActivityLog.date >= start_date,
                    ActivityLog.date <= end_date,
                )
                .order_by(ActivityLog.date, ActivityLog.name)
            )
        )

    # =====================================================================
    # AGGREGATES
    # =====================================================================

    def total_quarter_hours(self, db: Session, *, user_id: int, day: date) -> int:
        """Sum of quarter-hours logged by the user on one day."""
        total = db.scalar(
            select(func.coalesce(func.sum(ActivityLog.quarter_hours), 0)).where(
                ActivityLog.user_id == user_id,
                ActivityLog.date == day,
            )
        )
        return int(total or 0)

    def complete_dates(
        self, db: Session, *, user_id: int, up_to: date
    ) -> List[date]:
        """Ascending dates on or before up_to whose total reaches a full day."""
        rows = db.execute(
            select(ActivityLog.date)
            .where(ActivityLog.user_id == user_id, ActivityLog.date <= up_to)
            .group_by(ActivityLog.date)
            .having(func.sum(ActivityLog.quarter_hours) >= MAX_QUARTER_HOURS)
            .order_by(ActivityLog.date)
        )
        return [row[0] for row in rows]


crud_activity_log = CRUDActivityLog()
