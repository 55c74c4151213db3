"""Task service for memobot.

The only component aware of task identity: loads records from the store,
asks the scheduling engine for successor states, and writes them back.
"""

import logging
from datetime import date, datetime
from typing import Callable, List, Optional, Union

from memobot.database.store import TaskStore
from memobot.engine.due import select_due, order_by_due_date
from memobot.engine.policy import SchedulingPolicy
from memobot.engine.scheduler import next_recurrence_state, parse_rating, to_day
from memobot.errors import InvalidInputError, TaskNotFoundError
from memobot.models.constants import STARTER_TASK_NAME, STARTER_TASK_URL
from memobot.models.task import Rating, Task
from memobot.models.task_factory import create_task_base, new_task_id
from memobot.services.locks import KeyedLock

logger = logging.getLogger(__name__)

Now = Union[date, datetime]


class TaskService:
    """Create, list, rate and delete reviewable tasks.

    rate_task and delete_task hold a per-id lock across read-compute-write,
    so two ratings of the same task never both start from the same stale
    state. Reads take no locks.
    """

    def __init__(
        self,
        store: TaskStore,
        policy: Optional[SchedulingPolicy] = None,
        id_factory: Callable[[], str] = new_task_id,
    ):
        self.store = store
        self.policy = policy or SchedulingPolicy()
        self.id_factory = id_factory
        self._locks = KeyedLock()

    def create_task(self, name: str, url: Optional[str] = None, *, now: Now) -> Task:
        """Create a task that is due immediately.

        Raises:
            InvalidInputError: If name is blank or url is not a string
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError("Task name must be a non-empty string")
        if url is not None and not isinstance(url, str):
            raise InvalidInputError("Task url must be a string")

        task = create_task_base(
            name=name,
            now=to_day(now),
            url=url,
            task_id=self.id_factory(),
            min_interval_days=self.policy.min_interval_days,
        )
        created = self.store.put(task)
        logger.info(f"Created task {created.id}: {created.name[:50]}")
        return created

    def get_task(self, task_id: str) -> Task:
        """Return a task by id.

        Raises:
            TaskNotFoundError: If the id is unknown
        """
        task = self.store.get(task_id)
        if task is None:
            logger.warning(f"Task {task_id} not found")
            raise TaskNotFoundError(task_id)
        return task

    def list_tasks(self) -> List[Task]:
        """All tasks, earliest due first."""
        return order_by_due_date(self.store.scan())

    def list_due_tasks(self, now: Now) -> List[Task]:
        """Tasks with due_date <= now, ordered by (due_date, id)."""
        return select_due(self.store.scan(), now)

    def rate_task(self, task_id: str, rating: Union[Rating, str], now: Now) -> Task:
        """Apply a rating and persist the rescheduled task.

        Raises:
            InvalidRatingError: If rating is not easy, hard or again
            TaskNotFoundError: If the id is unknown
            InvalidStateError: If the stored recurrence state is corrupt
        """
        rating = parse_rating(rating)
        today = to_day(now)

        with self._locks.hold(task_id):
            task = self.get_task(task_id)
            state = next_recurrence_state(task.recurrence_state(), rating, today, self.policy)
            updated = self.store.put(
                task.model_copy(
                    update={
                        "interval_days": state.interval_days,
                        "streak": state.streak,
                        "due_date": state.due_date,
                        "last_rated_on": today,
                    }
                )
            )

        logger.info(
            f"Rated task {task_id} '{rating.value}': due {updated.due_date.isoformat()} "
            f"(interval={updated.interval_days}d, streak={updated.streak})"
        )
        return updated

    def delete_task(self, task_id: str) -> None:
        """Delete a task permanently.

        Raises:
            TaskNotFoundError: If the id is unknown (including a repeated delete)
        """
        with self._locks.hold(task_id):
            if not self.store.delete(task_id):
                logger.warning(f"Task {task_id} not found")
                raise TaskNotFoundError(task_id)
        logger.info(f"Deleted task {task_id}")

    def seed_if_empty(self, now: Now) -> Optional[Task]:
        """Create the starter task when the store holds no tasks.

        Returns:
            The starter task, or None if the store already had tasks
        """
        if self.store.scan():
            return None
        return self.create_task(STARTER_TASK_NAME, STARTER_TASK_URL, now=now)
