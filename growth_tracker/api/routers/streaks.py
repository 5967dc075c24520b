# growth_tracker/api/routers/streaks.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from growth_tracker.core.config import get_db
from growth_tracker.core.dates import parse_date, today_utc
from growth_tracker.core.security import get_current_user
from growth_tracker.models.user import User
from growth_tracker.services.streak import streak_service
from growth_tracker.services.user import user_service
from growth_tracker.schemas.activity import GetStreakRequest, StreakRead, StreakResponse

router = APIRouter(tags=["Streaks"])


@router.post("/get-streak", response_model=StreakResponse, summary="Current and longest streak")
def get_streak(
    body: GetStreakRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Streak of consecutive complete (24-hour) days as of `date`.

    - **username**: Whose streak to compute
    - **date**: Reference day, YYYY-MM-DD; defaults to today in UTC

    If the reference day is not complete yet, the current streak is counted
    from the day before.
    """
    reference_date = parse_date(body.date) if body.date is not None else today_utc()
    target = user_service.get_viewable_user(db, viewer=current_user, username=body.username)

    result = streak_service.streak_for(db, user_id=target.id, reference_date=reference_date)
    return StreakResponse(
        data=StreakRead(current=result.current, longest=result.longest, date=reference_date)
    )
