"""Flat-file JSON persistence for the topic collection."""
import json
from datetime import datetime
from pathlib import Path

from sir_tracker.config import DEFAULT_STORAGE_PATH
from sir_tracker.errors import StorageCorruptError, StorageError
from sir_tracker.logging import get_logger
from sir_tracker.models import ReviewTopic
from sir_tracker.schedule import ReviewGap
from sir_tracker.topics import TopicCollection

logger = get_logger(__name__)

# On-disk field names. Changing them breaks existing storage files.
TOPIC_LIST_KEY = "review_topic_list"
NAME_KEY = "topic_name"
LAST_REVIEWED_KEY = "last_reviewed"
GAP_KEY = "next_review_gap"


def _parse_timestamp(value: str) -> datetime:
    # Older files carry nanosecond precision; datetime keeps microseconds.
    if "." in value:
        head, _, rest = value.partition(".")
        digits = len(rest) - len(rest.lstrip("0123456789"))
        value = head + "." + rest[:min(digits, 6)] + rest[digits:]
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def topic_to_dict(topic: ReviewTopic) -> dict:
    return {
        NAME_KEY: topic.name,
        LAST_REVIEWED_KEY: topic.last_reviewed.isoformat(),
        GAP_KEY: topic.gap.value,
    }


def topic_from_dict(data: dict) -> ReviewTopic:
    return ReviewTopic(
        name=data[NAME_KEY],
        last_reviewed=_parse_timestamp(data[LAST_REVIEWED_KEY]),
        gap=ReviewGap(data[GAP_KEY]),
    )


def load_collection(path: str | Path = DEFAULT_STORAGE_PATH) -> TopicCollection:
    """Read saved topics, or return an empty collection if nothing is saved.

    Raises:
        StorageCorruptError: if the file exists but cannot be read or parsed.
    """
    path = Path(path)
    if not path.exists():
        logger.debug("storage_missing", path=str(path))
        return TopicCollection()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        topics = [topic_from_dict(item) for item in data[TOPIC_LIST_KEY]]
        names = [t.name for t in topics]
        if len(set(names)) != len(names):
            raise ValueError("duplicate topic names")
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.debug("storage_corrupt", path=str(path), error=str(e))
        raise StorageCorruptError(f"Could not read saved topics from {path}: {e}") from e
    logger.debug("storage_loaded", path=str(path), topics=len(topics))
    return TopicCollection(topics)


def save_collection(collection: TopicCollection, path: str | Path = DEFAULT_STORAGE_PATH) -> None:
    """Write topics as pretty-printed JSON, creating the directory if needed.

    Raises:
        StorageError: if the file cannot be written.
    """
    path = Path(path)
    payload = {TOPIC_LIST_KEY: [topic_to_dict(t) for t in collection]}
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        logger.warning("storage_write_failed", path=str(path), error=str(e))
        raise StorageError(f"Could not write topics to {path}: {e}") from e
    logger.debug("storage_saved", path=str(path), topics=len(collection))
