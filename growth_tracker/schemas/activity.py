from typing import Any, List, Optional
from datetime import date

from pydantic import BaseModel, ConfigDict, Field


# ----------------------
# Requests
# ----------------------
# Activity names, hours and dates are validated by the service layer so that
# failures carry their own error codes (INVALID_ACTIVITY, INVALID_HOURS, ...).
# Hours and dates are left untyped here for the same reason.


class CreateActivityRequest(BaseModel):
    username: str = Field(..., min_length=1)
    activity: str = Field(..., description="One of the fixed activity names")
    hours: Any = Field(..., description="0-24 in steps of 0.25")
    date: Any = Field(..., description="Calendar day, YYYY-MM-DD")
    note: Optional[str] = None


class GetActivitiesRequest(BaseModel):
    username: str = Field(..., min_length=1)
    start_date: Any = Field(..., description="Inclusive start, YYYY-MM-DD")
    end_date: Any = Field(..., description="Inclusive end, YYYY-MM-DD")


class DaySummaryRequest(BaseModel):
    username: str = Field(..., min_length=1)
    date: Any = Field(..., description="Calendar day, YYYY-MM-DD")


class GetStreakRequest(BaseModel):
    username: str = Field(..., min_length=1)
    date: Optional[Any] = Field(
        default=None, description="Reference day, YYYY-MM-DD; defaults to today (UTC)"
    )


# ----------------------
# Read models
# ----------------------


class ActivityRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    hours: float
    date: date
    note: Optional[str] = None


class DailyTotalRead(BaseModel):
    date: date
    total: float
    complete: bool


class StreakRead(BaseModel):
    current: int
    longest: int
    date: date


class LoggedActivityRead(BaseModel):
    activity: ActivityRead
    day: DailyTotalRead


# ----------------------
# Response envelopes
# ----------------------


class CreateActivityResponse(BaseModel):
    success: bool = True
    message: str = "Activity saved successfully"
    data: LoggedActivityRead


class ActivityListResponse(BaseModel):
    success: bool = True
    data: List[ActivityRead]


class DaySummaryResponse(BaseModel):
    success: bool = True
    data: DailyTotalRead


class StreakResponse(BaseModel):
    success: bool = True
    data: StreakRead
