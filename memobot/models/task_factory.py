"""Task creation factory for memobot.

This module centralizes task creation logic so every new task starts from
the same recurrence state.
"""

import uuid
from datetime import date
from typing import Any, Dict, Optional

from memobot.models.task import Task
from memobot.models.constants import DEFAULT_MIN_INTERVAL_DAYS


def new_task_id() -> str:
    """Generate a fresh opaque task id."""
    return str(uuid.uuid4())


def normalize_url(url: Optional[str]) -> Optional[str]:
    """Strip a reference link, mapping blank values to None.

    Args:
        url: Raw link as entered by the user

    Returns:
        Stripped link, or None when nothing usable was given
    """
    if url is None:
        return None
    url = url.strip()
    return url or None


def create_task_defaults(min_interval_days: int = DEFAULT_MIN_INTERVAL_DAYS) -> Dict[str, Any]:
    """Get the initial recurrence state as a dictionary."""
    return {
        "interval_days": min_interval_days,
        "streak": 0,
        "last_rated_on": None,
    }


def create_task_base(
    name: str,
    now: date,
    url: Optional[str] = None,
    task_id: Optional[str] = None,
    min_interval_days: int = DEFAULT_MIN_INTERVAL_DAYS,
) -> Task:
    """Create a task that is due immediately.

    Args:
        name: Display label (already validated as non-blank)
        now: Creation date; the task is due on this date
        url: Optional reference link
        task_id: Explicit id (a UUID v4 is generated when omitted)
        min_interval_days: Interval floor of the active scheduling policy

    Returns:
        Task object with defaults applied
    """
    defaults = create_task_defaults(min_interval_days)
    return Task(
        id=task_id or new_task_id(),
        name=name.strip(),
        url=normalize_url(url),
        due_date=now,
        interval_days=defaults["interval_days"],
        streak=defaults["streak"],
        last_rated_on=defaults["last_rated_on"],
    )
