# tests/test_schedule.py
from datetime import date, datetime, timedelta, timezone

import pytest

from sir_tracker.schedule import (
    GAP_OFFSET_DAYS, ReviewGap, days_until_review, gap_offset_days, next_gap, now, review_day,
)

CET = timezone(timedelta(hours=1))


def test_gap_offsets():
    assert gap_offset_days(ReviewGap.DAY) == 1
    assert gap_offset_days(ReviewGap.WEEK) == 7
    assert gap_offset_days(ReviewGap.MONTH) == 30
    assert set(GAP_OFFSET_DAYS) == set(ReviewGap)


def test_gap_ordering():
    assert ReviewGap.DAY < ReviewGap.WEEK
    assert ReviewGap.WEEK < ReviewGap.MONTH
    assert ReviewGap.MONTH > ReviewGap.DAY
    assert ReviewGap.DAY == ReviewGap.DAY
    assert sorted([ReviewGap.MONTH, ReviewGap.DAY, ReviewGap.WEEK]) == [
        ReviewGap.DAY, ReviewGap.WEEK, ReviewGap.MONTH,
    ]


def test_escalation_path():
    assert next_gap(ReviewGap.DAY) is ReviewGap.WEEK
    assert next_gap(ReviewGap.WEEK) is ReviewGap.MONTH
    assert next_gap(ReviewGap.MONTH) is ReviewGap.MONTH


def test_gap_names_match_storage_vocabulary():
    assert [g.value for g in ReviewGap] == ["Day", "Week", "Month"]
    assert str(ReviewGap.WEEK) == "Week"


def test_review_day_ignores_time_of_day():
    late = datetime(2024, 3, 1, 23, 59, tzinfo=CET)
    assert review_day(late, ReviewGap.DAY) == date(2024, 3, 2)


def test_review_day_rolls_over_month_in_leap_year():
    reviewed = datetime(2024, 1, 31, 8, 0, tzinfo=CET)
    assert review_day(reviewed, ReviewGap.MONTH) == date(2024, 3, 1)


def test_review_day_rolls_over_year():
    reviewed = datetime(2023, 12, 28, 8, 0, tzinfo=CET)
    assert review_day(reviewed, ReviewGap.WEEK) == date(2024, 1, 4)


def test_days_until_review_is_signed():
    reviewed = datetime(2024, 3, 1, 9, 30, tzinfo=CET)
    assert days_until_review(reviewed, ReviewGap.DAY, today=date(2024, 3, 1)) == 1
    assert days_until_review(reviewed, ReviewGap.DAY, today=date(2024, 3, 2)) == 0
    assert days_until_review(reviewed, ReviewGap.DAY, today=date(2024, 3, 5)) == -3
    assert days_until_review(reviewed, ReviewGap.WEEK, today=date(2024, 3, 1)) == 7


def test_review_day_overflow_raises():
    reviewed = datetime(9999, 12, 31, 12, 0, tzinfo=timezone.utc)
    with pytest.raises(OverflowError):
        review_day(reviewed, ReviewGap.DAY)


def test_now_is_timezone_aware():
    assert now().tzinfo is not None


def test_review_day_uses_local_calendar_date(local_tz):
    # 23:30 at -05:00 is already 2 March in UTC
    reviewed = datetime(2024, 3, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    local_tz("UTC0")
    assert review_day(reviewed, ReviewGap.DAY) == date(2024, 3, 3)
    assert days_until_review(reviewed, ReviewGap.DAY, today=date(2024, 3, 2)) == 1

    local_tz("EST+5")
    assert review_day(reviewed, ReviewGap.DAY) == date(2024, 3, 2)
    assert days_until_review(reviewed, ReviewGap.DAY, today=date(2024, 3, 2)) == 0
