"""Due-task selection for memobot.

Filters tasks down to the ones due at a given date and orders them
earliest-due first. This produces a deterministic ordering for display.
"""

from datetime import date, datetime
from typing import Iterable, List, Union
from memobot.models.task import Task
from memobot.engine.scheduler import to_day


def is_due(task: Task, now: Union[date, datetime]) -> bool:
    """Return True when the task's due date is on or before now."""
    return task.due_date <= to_day(now)


def order_by_due_date(tasks: Iterable[Task]) -> List[Task]:
    """Sort tasks by due date, then by id to break ties.

    Args:
        tasks: Tasks to sort

    Returns:
        New list, earliest due first
    """
    return sorted(tasks, key=_due_sort_key)


def select_due(tasks: Iterable[Task], now: Union[date, datetime]) -> List[Task]:
    """Select the tasks due at now.

    This function is deterministic - same inputs always produce same outputs.

    Args:
        tasks: Candidate tasks
        now: Current time (truncated to its date)

    Returns:
        Due tasks ordered by (due_date, id)
    """
    today = to_day(now)
    return order_by_due_date(task for task in tasks if task.due_date <= today)


def _due_sort_key(task: Task) -> tuple:
    return (task.due_date, task.id)
