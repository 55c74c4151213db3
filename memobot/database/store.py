"""Task store contract and an in-memory implementation."""

import threading
from typing import Dict, List, Optional, Protocol

from memobot.models.task import Task
from memobot.engine.due import order_by_due_date


class TaskStore(Protocol):
    """Protocol for durable task storage.

    The store holds records only; it has no scheduling logic.
    """

    def get(self, task_id: str) -> Optional[Task]:
        """Return the task, or None if no record has this id."""
        ...

    def put(self, task: Task) -> Task:
        """Insert or replace a task atomically."""
        ...

    def delete(self, task_id: str) -> bool:
        """Remove a task. Returns False if no record has this id."""
        ...

    def scan(self) -> List[Task]:
        """Return every task ordered by (due_date, id)."""
        ...


class InMemoryTaskStore:
    """Dict-backed TaskStore for embedding and tests. Not durable."""

    def __init__(self):
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.Lock()

    def get(self, task_id: str) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return task.model_copy() if task else None

    def put(self, task: Task) -> Task:
        with self._lock:
            self._tasks[task.id] = task.model_copy()
            return task.model_copy()

    def delete(self, task_id: str) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None

    def scan(self) -> List[Task]:
        with self._lock:
            snapshot = [task.model_copy() for task in self._tasks.values()]
        return order_by_due_date(snapshot)
