"""Tests for current/longest streak calculation.

Rules:
- A day counts when its logged hours reach 24
- current counts back from the reference day, or from the day before it
  when the reference day is still incomplete
- longest is the longest run of consecutive complete days up to the reference day
"""

import pytest

from growth_tracker.data.activities import ACTIVITY_NAMES
from growth_tracker.services.activity_log import activity_log_service
from growth_tracker.services.streak import StreakResult, calculate_streak, streak_service

from factories import day


class TestCalculateStreak:
    pytestmark = pytest.mark.unit

    def test_empty_history(self):
        assert calculate_streak([], day(5)) == StreakResult(current=0, longest=0)

    def test_single_complete_day_is_reference_day(self):
        assert calculate_streak([day(1)], day(1)) == StreakResult(current=1, longest=1)

    def test_gap_before_incomplete_reference_day_breaks_current(self):
        # Days 1-3 complete, day 4 missing, reference day 5 incomplete
        result = calculate_streak([day(1), day(2), day(3)], day(5))
        assert result == StreakResult(current=0, longest=3)

    def test_incomplete_reference_day_counts_from_previous_day(self):
        # Days 1-4 complete, day 5 (reference) still being logged
        result = calculate_streak([day(1), day(2), day(3), day(4)], day(5))
        assert result == StreakResult(current=4, longest=4)

    def test_complete_reference_day_counts_itself(self):
        result = calculate_streak([day(n) for n in range(1, 6)], day(5))
        assert result == StreakResult(current=5, longest=5)

    def test_old_run_kept_as_longest(self):
        dates = [day(1), day(2), day(3), day(4), day(10), day(11)]
        assert calculate_streak(dates, day(11)) == StreakResult(current=2, longest=4)

    def test_non_contiguous_history(self):
        # Last complete day two days before the reference day
        assert calculate_streak([day(1), day(2)], day(4)) == StreakResult(current=0, longest=2)

    def test_days_after_reference_are_ignored(self):
        dates = [day(1), day(2), day(3), day(4), day(5), day(6)]
        assert calculate_streak(dates, day(2)) == StreakResult(current=2, longest=2)

    def test_duplicates_and_order_do_not_matter(self):
        dates = [day(3), day(1), day(2), day(2), day(3)]
        assert calculate_streak(dates, day(3)) == StreakResult(current=3, longest=3)

    def test_streak_across_month_boundary(self):
        # day(29) == 2024-03-29 ... day(32) == 2024-04-01
        dates = [day(n) for n in range(29, 33)]
        assert calculate_streak(dates, day(32)) == StreakResult(current=4, longest=4)


def complete_day(db, user, n):
    """Log exactly 24 hours on day n."""
    for name in ACTIVITY_NAMES[:12]:
        activity_log_service.log_activity(
            db, user_id=user.id, activity_name=name, day=day(n), hours=2
        )


class TestStreakService:
    def test_unknown_user_has_no_streak(self, db_session):
        assert streak_service.streak_for(
            db_session, user_id=9999, reference_date=day(1)
        ) == StreakResult(current=0, longest=0)

    def test_streak_from_logged_history(self, db_session, user):
        for n in (1, 2, 3):
            complete_day(db_session, user, n)

        result = streak_service.streak_for(db_session, user_id=user.id, reference_date=day(3))
        assert result == StreakResult(current=3, longest=3)

    def test_partially_logged_day_does_not_count(self, db_session, user):
        complete_day(db_session, user, 1)
        activity_log_service.log_activity(
            db_session, user_id=user.id, activity_name="sleep", day=day(2), hours=23.75
        )

        result = streak_service.streak_for(db_session, user_id=user.id, reference_date=day(2))
        assert result == StreakResult(current=1, longest=1)

    def test_lowering_hours_breaks_a_streak(self, db_session, user):
        for n in (1, 2, 3):
            complete_day(db_session, user, n)
        activity_log_service.log_activity(
            db_session, user_id=user.id, activity_name="sleep", day=day(2), hours=0
        )

        result = streak_service.streak_for(db_session, user_id=user.id, reference_date=day(3))
        assert result == StreakResult(current=1, longest=1)

    def test_streaks_are_per_user(self, db_session, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        complete_day(db_session, alice, 1)

        assert streak_service.streak_for(
            db_session, user_id=bob.id, reference_date=day(1)
        ) == StreakResult(current=0, longest=0)
