"""Data classes for the review tracker domain model."""
from dataclasses import dataclass, field
from datetime import date, datetime

from sir_tracker.schedule import ReviewGap, days_until_review, local_date, next_gap, now


@dataclass
class ReviewTopic:
    name: str
    last_reviewed: datetime = field(default_factory=now)
    gap: ReviewGap = ReviewGap.DAY

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Topic name must not be empty")

    def days_until_review(self, today: date | None = None) -> int:
        return days_until_review(self.last_reviewed, self.gap, today)

    def is_time_to_review(self, today: date | None = None) -> bool:
        return self.days_until_review(today) <= 0

    def days_since_review(self, today: date | None = None) -> int:
        today = today or date.today()
        return (today - local_date(self.last_reviewed)).days

    def review(self, reviewed_at: datetime | None = None) -> None:
        """Escalate the review gap and stamp the review time."""
        self.gap = next_gap(self.gap)
        self.last_reviewed = reviewed_at or now()

    def sort_key(self, today: date | None = None) -> tuple[int, str]:
        return self.days_until_review(today), self.name

    def _compare_keys(self, other: "ReviewTopic"):
        today = date.today()
        return self.sort_key(today), other.sort_key(today)

    def __lt__(self, other: "ReviewTopic") -> bool:
        if not isinstance(other, ReviewTopic):
            return NotImplemented
        mine, theirs = self._compare_keys(other)
        return mine < theirs

    def __le__(self, other: "ReviewTopic") -> bool:
        if not isinstance(other, ReviewTopic):
            return NotImplemented
        mine, theirs = self._compare_keys(other)
        return mine <= theirs

    def __gt__(self, other: "ReviewTopic") -> bool:
        if not isinstance(other, ReviewTopic):
            return NotImplemented
        mine, theirs = self._compare_keys(other)
        return mine > theirs

    def __ge__(self, other: "ReviewTopic") -> bool:
        if not isinstance(other, ReviewTopic):
            return NotImplemented
        mine, theirs = self._compare_keys(other)
        return mine >= theirs
