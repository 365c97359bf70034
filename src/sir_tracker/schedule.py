"""Review gap tiers and due-date arithmetic."""
from datetime import date, datetime, timedelta
from enum import Enum


class ReviewGap(Enum):
    """Spacing interval between reviews. Only ever escalates."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"

    def __lt__(self, other: "ReviewGap") -> bool:
        if not isinstance(other, ReviewGap):
            return NotImplemented
        return _ORDER.index(self) < _ORDER.index(other)

    def __le__(self, other: "ReviewGap") -> bool:
        if not isinstance(other, ReviewGap):
            return NotImplemented
        return self == other or self < other

    def __str__(self) -> str:
        return self.value


_ORDER = (ReviewGap.DAY, ReviewGap.WEEK, ReviewGap.MONTH)

GAP_OFFSET_DAYS = {
    ReviewGap.DAY: 1,
    ReviewGap.WEEK: 7,
    ReviewGap.MONTH: 30,
}


def gap_offset_days(gap: ReviewGap) -> int:
    return GAP_OFFSET_DAYS[gap]


def next_gap(gap: ReviewGap) -> ReviewGap:
    """Escalate one tier. Month is terminal."""
    if gap is ReviewGap.DAY:
        return ReviewGap.WEEK
    return ReviewGap.MONTH


def local_date(moment: datetime) -> date:
    """Calendar date of a timestamp as seen in the local time zone."""
    return moment.astimezone().date()


def review_day(last_reviewed: datetime, gap: ReviewGap) -> date:
    """Calendar date on which a topic becomes due.

    Raises:
        OverflowError: if the result falls outside the representable range.
    """
    return local_date(last_reviewed) + timedelta(days=gap_offset_days(gap))


def days_until_review(last_reviewed: datetime, gap: ReviewGap, today: date | None = None) -> int:
    """Signed whole days from today until the review day (<= 0 means due)."""
    today = today or date.today()
    return (review_day(last_reviewed, gap) - today).days


def now() -> datetime:
    """Current local time with its UTC offset attached."""
    return datetime.now().astimezone()
