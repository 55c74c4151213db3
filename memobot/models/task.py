"""Task data model for memobot."""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Rating(str, Enum):
    """Review feedback that drives the next due date."""
    EASY = "easy"
    HARD = "hard"
    AGAIN = "again"


class RecurrenceState(BaseModel):
    """Recurrence state of a single task, without identity.

    Deliberately unconstrained: the scheduling engine validates it and
    reports corrupt values instead of pydantic coercing or rejecting them.
    """

    interval_days: int = Field(..., description="Current recurrence interval in days")
    streak: int = Field(..., description="Consecutive easy/hard ratings since the last again")
    due_date: date = Field(..., description="Date the task next becomes due")


class Task(BaseModel):
    """Canonical Task model."""

    id: str = Field(..., description="Unique task identifier (UUID v4)")
    name: str = Field(..., min_length=1, description="Display label")
    url: Optional[str] = Field(None, description="Optional reference link")
    due_date: date = Field(..., description="Date the task next becomes due")
    interval_days: int = Field(..., description="Current recurrence interval in days")
    streak: int = Field(0, description="Consecutive easy/hard ratings since the last again")
    last_rated_on: Optional[date] = Field(None, description="Date of the most recent rating")

    def recurrence_state(self) -> RecurrenceState:
        """Return the scheduling-relevant part of this task."""
        return RecurrenceState(
            interval_days=self.interval_days,
            streak=self.streak,
            due_date=self.due_date,
        )
