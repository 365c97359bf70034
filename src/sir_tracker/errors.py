"""Exception hierarchy for the review tracker."""


class SirTrackerError(Exception):
    """Base class for all review tracker errors."""


class TopicNotFoundError(SirTrackerError):
    def __init__(self, name: str):
        super().__init__(f"Review topic '{name}' was not found")
        self.name = name


class DuplicateTopicError(SirTrackerError):
    def __init__(self, name: str):
        super().__init__(f"Review topic '{name}' already exists")
        self.name = name


class StorageError(SirTrackerError):
    """Saved topics could not be written."""


class StorageCorruptError(StorageError):
    """Saved topics exist but could not be read back."""
