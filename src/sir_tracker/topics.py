"""Topic collection: dedup, lookup, rename and urgency ordering."""
from collections.abc import Callable, Iterator
from datetime import date

from sir_tracker.errors import DuplicateTopicError, TopicNotFoundError
from sir_tracker.models import ReviewTopic


def format_days_until_review(days: int) -> str:
    """Human-readable next-review label for the "All" view."""
    if days <= 0:
        return "Today"
    unit = "Day" if days == 1 else "Days"
    return f"{days} {unit}"


class TopicCollection:
    """Review topics unique by name, kept sorted by urgency.

    Topics are owned by the collection. Callers look topics up with find()
    and mutate them only through update().
    """

    def __init__(self, topics: list[ReviewTopic] | None = None):
        self._topics: list[ReviewTopic] = []
        for topic in topics or []:
            self.add(topic)

    def __len__(self) -> int:
        return len(self._topics)

    def __iter__(self) -> Iterator[ReviewTopic]:
        return iter(self._topics)

    def __contains__(self, name: str) -> bool:
        return self._index(name) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TopicCollection):
            return NotImplemented
        return self._topics == other._topics

    @property
    def topics(self) -> list[ReviewTopic]:
        return list(self._topics)

    def _index(self, name: str) -> int | None:
        for i, topic in enumerate(self._topics):
            if topic.name == name:
                return i
        return None

    def _sort(self, today: date | None = None) -> None:
        today = today or date.today()
        self._topics.sort(key=lambda t: t.sort_key(today))

    def add(self, topic: ReviewTopic) -> bool:
        """Insert a topic unless its name is taken. Returns True if inserted."""
        if topic.name in self:
            return False
        self._topics.append(topic)
        self._sort()
        return True

    def remove(self, topic: ReviewTopic | str) -> bool:
        name = topic.name if isinstance(topic, ReviewTopic) else topic
        index = self._index(name)
        if index is None:
            return False
        del self._topics[index]
        return True

    def find(self, name: str) -> ReviewTopic | None:
        index = self._index(name)
        return self._topics[index] if index is not None else None

    def update(self, name: str, mutate: Callable[[ReviewTopic], None]) -> ReviewTopic:
        """Apply ``mutate`` to the named topic and restore canonical order.

        Raises:
            TopicNotFoundError: if no topic has that name.
        """
        index = self._index(name)
        if index is None:
            raise TopicNotFoundError(name)
        topic = self._topics.pop(index)
        try:
            mutate(topic)
        finally:
            self._topics.append(topic)
            self._sort()
        return topic

    def rename(self, old_name: str, new_name: str) -> ReviewTopic:
        if old_name not in self:
            raise TopicNotFoundError(old_name)
        if new_name != old_name and new_name in self:
            raise DuplicateTopicError(new_name)
        if not new_name or not new_name.strip():
            raise ValueError("Topic name must not be empty")

        def _set_name(topic: ReviewTopic) -> None:
            topic.name = new_name

        return self.update(old_name, _set_name)

    def review_by_name(self, name: str) -> ReviewTopic:
        return self.update(name, lambda topic: topic.review())

    def list_due(self, today: date | None = None) -> list[ReviewTopic]:
        today = today or date.today()
        due = [t for t in self._topics if t.is_time_to_review(today)]
        return sorted(due, key=lambda t: t.sort_key(today))

    def list_all(self, today: date | None = None) -> list[tuple[ReviewTopic, str]]:
        today = today or date.today()
        return [
            (t, format_days_until_review(t.days_until_review(today)))
            for t in sorted(self._topics, key=lambda t: t.sort_key(today))
        ]
