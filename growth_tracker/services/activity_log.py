import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Union

from sqlalchemy.orm import Session

from growth_tracker.core.exceptions import (
    InvalidActivityError,
    InvalidDateError,
    InvalidHoursError,
    InvalidNoteError,
)
from growth_tracker.crud.activity_log import crud_activity_log
from growth_tracker.data.activities import (
    MAX_NOTE_LENGTH,
    MAX_QUARTER_HOURS,
    QUARTERS_PER_HOUR,
    is_valid_activity,
)
from growth_tracker.models.activity_log import ActivityLog

logger = logging.getLogger(__name__)


# ====================================================
# VALUE OBJECTS
# ====================================================


@dataclass(frozen=True)
class DailyTotal:
    date: date
    quarter_hours: int

    @property
    def total(self) -> float:
        return self.quarter_hours / QUARTERS_PER_HOUR

    @property
    def complete(self) -> bool:
        return self.quarter_hours >= MAX_QUARTER_HOURS


# ====================================================
# VALIDATION HELPERS
# ====================================================


def hours_to_quarter_hours(hours: Union[int, float, str, Decimal]) -> int:
    """
    Convert an hours value to whole quarter-hours.

    The submitted literal is read as a decimal so 0.1-style binary float
    error never decides whether a value is on the 0.25 grid.

    Raises:
        InvalidHoursError: If not a number, outside 0-24, or off the 0.25 grid
    """
    if isinstance(hours, bool):
        raise InvalidHoursError("Hours must be a number")
    try:
        value = Decimal(str(hours))
    except (InvalidOperation, ValueError):
        raise InvalidHoursError("Hours must be a number")

    if not value.is_finite():
        raise InvalidHoursError("Hours must be a finite number")
    if value < 0 or value > 24:
        raise InvalidHoursError("Hours must be between 0 and 24")

    quarters = value * QUARTERS_PER_HOUR
    if quarters != quarters.to_integral_value():
        raise InvalidHoursError("Hours must be a multiple of 0.25")
    return int(quarters)


def validate_activity_name(name: str) -> str:
    if not is_valid_activity(name):
        raise InvalidActivityError(f"Invalid activity name: {name}")
    return name


def validate_note(note: Optional[str]) -> Optional[str]:
    if note is None:
        return None
    if len(note) > MAX_NOTE_LENGTH:
        raise InvalidNoteError(f"Note must be at most {MAX_NOTE_LENGTH} characters")
    return note


# ====================================================
# SERVICE
# ====================================================


class ActivityLogService:
    """Logging hours per activity and per-day completion accounting."""

    def __init__(self):
        self.crud = crud_activity_log

    def log_activity(
        self,
        db: Session,
        *,
        user_id: int,
        activity_name: str,
        day: date,
        hours: Union[int, float, str, Decimal],
        note: Optional[str] = None,
    ) -> ActivityLog:
        """
        Create or overwrite the hours logged for one activity on one day.

        Raises:
            InvalidActivityError, InvalidHoursError, InvalidNoteError
        """
        name = validate_activity_name(activity_name)
        quarter_hours = hours_to_quarter_hours(hours)
        note = validate_note(note)

        try:
            row = self.crud.upsert(
                db,
                user_id=user_id,
                name=name,
                day=day,
                quarter_hours=quarter_hours,
                note=note,
            )
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(
            f"Logged activity user_id={user_id} name={name} date={day} "
            f"quarter_hours={quarter_hours}"
        )
        return row

    def get_activities(
        self, db: Session, *, user_id: int, start_date: date, end_date: date
    ) -> List[ActivityLog]:
        """All logged activities in an inclusive date range."""
        if start_date > end_date:
            raise InvalidDateError("start_date must not be after end_date")
        return self.crud.get_range(
            db, user_id=user_id, start_date=start_date, end_date=end_date
        )

    def total_for(self, db: Session, *, user_id: int, day: date) -> DailyTotal:
        """Sum of logged hours for a day and whether it reaches 24 hours."""
        quarter_hours = self.crud.total_quarter_hours(db, user_id=user_id, day=day)
        return DailyTotal(date=day, quarter_hours=quarter_hours)


activity_log_service = ActivityLogService()
