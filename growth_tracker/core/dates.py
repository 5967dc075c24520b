import re
from datetime import date, datetime, timezone
from typing import Any

from growth_tracker.core.exceptions import InvalidDateError

DATE_FORMAT = "%Y-%m-%d"
_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: Any, field: str = "date") -> date:
    """
    Parse a client-supplied calendar day in strict YYYY-MM-DD form.

    Clients send their local calendar day, so no timezone conversion is applied.

    Raises:
        InvalidDateError: If the value is missing, not a string or malformed
    """
    if not isinstance(value, str) or not _DATE_RE.match(value):
        raise InvalidDateError(f"Invalid {field}, use YYYY-MM-DD")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise InvalidDateError(f"Invalid {field}, use YYYY-MM-DD")


def today_utc() -> date:
    """Server-side 'today' when the client does not supply a day."""
    return datetime.now(timezone.utc).date()
