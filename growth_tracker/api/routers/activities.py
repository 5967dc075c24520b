# growth_tracker/api/routers/activities.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from growth_tracker.api.routing import DecimalJSONRoute
from growth_tracker.core.config import get_db
from growth_tracker.core.dates import parse_date
from growth_tracker.core.security import get_current_user
from growth_tracker.models.activity_log import ActivityLog
from growth_tracker.models.user import User
from growth_tracker.services.activity_log import DailyTotal, activity_log_service
from growth_tracker.services.user import user_service
from growth_tracker.schemas.activity import (
    ActivityListResponse,
    ActivityRead,
    CreateActivityRequest,
    CreateActivityResponse,
    DailyTotalRead,
    DaySummaryRequest,
    DaySummaryResponse,
    GetActivitiesRequest,
    LoggedActivityRead,
)

router = APIRouter(tags=["Activities"], route_class=DecimalJSONRoute)


def to_activity_read(row: ActivityLog) -> ActivityRead:
    return ActivityRead(
        id=row.id,
        name=row.name,
        hours=row.hours,
        date=row.date,
        note=row.note,
    )


def to_daily_total_read(day_total: DailyTotal) -> DailyTotalRead:
    return DailyTotalRead(
        date=day_total.date,
        total=day_total.total,
        complete=day_total.complete,
    )


# ====================================================
# LOGGING
# ====================================================


@router.post(
    "/create-activity",
    response_model=CreateActivityResponse,
    summary="Log hours for an activity on a day"
)
def create_activity(
    body: CreateActivityRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Create or overwrite the hours for one activity on one day.

    - **username**: Must be the authenticated user
    - **activity**: One of the 16 activity names
    - **hours**: 0-24 in steps of 0.25
    - **date**: YYYY-MM-DD (the client's local calendar day)
    - **note**: Optional, at most 500 characters

    The response includes the day's new total and completion flag.
    """
    user_service.require_self(current_user, body.username)
    day = parse_date(body.date)

    row = activity_log_service.log_activity(
        db,
        user_id=current_user.id,
        activity_name=body.activity,
        day=day,
        hours=body.hours,
        note=body.note,
    )
    day_total = activity_log_service.total_for(db, user_id=current_user.id, day=day)

    return CreateActivityResponse(
        data=LoggedActivityRead(
            activity=to_activity_read(row),
            day=to_daily_total_read(day_total),
        )
    )


# ====================================================
# READING
# ====================================================


@router.post(
    "/get-activities",
    response_model=ActivityListResponse,
    summary="List logged activities in a date range"
)
def get_activities(
    body: GetActivitiesRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Activities for `username` between `start_date` and `end_date` inclusive."""
    start_date = parse_date(body.start_date, field="start_date")
    end_date = parse_date(body.end_date, field="end_date")
    target = user_service.get_viewable_user(db, viewer=current_user, username=body.username)

    rows = activity_log_service.get_activities(
        db, user_id=target.id, start_date=start_date, end_date=end_date
    )
    return ActivityListResponse(data=[to_activity_read(row) for row in rows])


@router.post(
    "/get-day-summary",
    response_model=DaySummaryResponse,
    summary="Total hours and completion for a day"
)
def get_day_summary(
    body: DaySummaryRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """A day is complete once its logged hours reach 24."""
    day = parse_date(body.date)
    target = user_service.get_viewable_user(db, viewer=current_user, username=body.username)

    day_total = activity_log_service.total_for(db, user_id=target.id, day=day)
    return DaySummaryResponse(data=to_daily_total_read(day_total))
