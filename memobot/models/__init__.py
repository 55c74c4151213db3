"""Data models for memobot."""

from memobot.models.task import Task, Rating, RecurrenceState

__all__ = [
    "Task",
    "Rating",
    "RecurrenceState",
]
