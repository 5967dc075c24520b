"""Tests for client date parsing."""

from datetime import date

import pytest

from growth_tracker.core.dates import parse_date
from growth_tracker.core.exceptions import InvalidDateError

pytestmark = pytest.mark.unit


def test_parses_calendar_day():
    assert parse_date("2024-02-29") == date(2024, 2, 29)


@pytest.mark.parametrize(
    "value",
    [None, "", 20240301, ["2024-03-01"], "2024-3-1", "2023-02-29", "2024-03-01T00:00", "2024-03-01\n"],
)
def test_rejects_malformed_values(value):
    with pytest.raises(InvalidDateError, match="start_date"):
        parse_date(value, field="start_date")
