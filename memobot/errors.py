"""Error taxonomy for memobot.

Every error here is recoverable by the caller. Storage failures are not
wrapped; they propagate as the storage library raised them.
"""

from typing import Any


class MemobotError(Exception):
    """Base class for all memobot errors."""


class InvalidInputError(MemobotError, ValueError):
    """Malformed create request (e.g. blank task name)."""


class InvalidRatingError(MemobotError, ValueError):
    """Rating outside easy/hard/again."""

    def __init__(self, rating: Any):
        super().__init__(f"Invalid rating: {rating!r} (expected one of: easy, hard, again)")
        self.rating = rating


class InvalidStateError(MemobotError, ValueError):
    """Recurrence state that the store should never have produced."""


class TaskNotFoundError(MemobotError, LookupError):
    """Operation targets a task id that is not in the store."""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id
