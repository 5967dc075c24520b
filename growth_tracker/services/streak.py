"""Streak calculation over complete (24-hour) days."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable

from sqlalchemy.orm import Session

from growth_tracker.crud.activity_log import crud_activity_log

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakResult:
    current: int
    longest: int


def calculate_streak(complete_dates: Iterable[date], reference_date: date) -> StreakResult:
    """Calculate current and longest streaks of consecutive complete days.

    Rules:
    - Only days on or before reference_date count.
    - longest = longest run of consecutive calendar days in that history.
    - current counts backward from reference_date when it is complete,
      otherwise from the day before, so a day still being logged does not
      break an intact streak. If that anchor day is incomplete, current = 0.

    Args:
        complete_dates: Days whose logged total reached 24 hours (any order,
            duplicates allowed)
        reference_date: The day the streak is evaluated for

    Returns:
        StreakResult(current, longest)
    """
    days = sorted({d for d in complete_dates if d <= reference_date})
    if not days:
        return StreakResult(current=0, longest=0)

    longest = 1
    run = 1
    for previous, day in zip(days, days[1:]):
        if day - previous == ONE_DAY:
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    complete = set(days)
    anchor = reference_date if reference_date in complete else reference_date - ONE_DAY
    current = 0
    while anchor in complete:
        current += 1
        anchor -= ONE_DAY

    return StreakResult(current=current, longest=longest)


class StreakService:
    """Computes streaks from activity history on every request."""

    def __init__(self):
        self.crud = crud_activity_log

    def streak_for(self, db: Session, *, user_id: int, reference_date: date) -> StreakResult:
        """Current and longest streak as of reference_date.

        A user without history (or an unknown id) gets StreakResult(0, 0).
        """
        complete_dates = self.crud.complete_dates(db, user_id=user_id, up_to=reference_date)
        return calculate_streak(complete_dates, reference_date)


streak_service = StreakService()
