"""Repository layer for database operations."""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session, sessionmaker

from memobot.models.task import Task
from memobot.database.models import TaskDB

logger = logging.getLogger(__name__)


class TaskRepository:
    """Repository for Task database operations.

    Implements the TaskStore protocol. Every call opens its own session from
    the factory, so one repository can be shared across threads. Each write
    commits a single row, which gives per-record atomicity.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def _session(self) -> Session:
        return self.session_factory()

    def get(self, task_id: str) -> Optional[Task]:
        """Get task by ID (None if absent)."""
        with self._session() as db:
            task_db = db.get(TaskDB, task_id)
            return task_db.to_pydantic() if task_db else None

    def put(self, task: Task) -> Task:
        """Insert a task or replace the stored record with the same id."""
        with self._session() as db:
            try:
                task_db = db.merge(TaskDB.from_pydantic(task))
                db.commit()
                db.refresh(task_db)
                logger.debug(f"Stored task {task.id}: {task.name[:50]}")
                return task_db.to_pydantic()
            except Exception as e:
                db.rollback()
                logger.error(f"Failed to store task {task.id}: {type(e).__name__}: {str(e)}")
                raise

    def delete(self, task_id: str) -> bool:
        """Permanently delete a task by ID. Returns False if it did not exist."""
        with self._session() as db:
            task_db = db.get(TaskDB, task_id)
            if not task_db:
                return False

            try:
                db.delete(task_db)
                db.commit()
                logger.debug(f"Deleted task {task_id}")
                return True
            except Exception as e:
                db.rollback()
                logger.error(f"Failed to delete task {task_id}: {type(e).__name__}: {str(e)}")
                raise

    def scan(self) -> List[Task]:
        """Get all tasks sorted by due date (earliest first), then id."""
        with self._session() as db:
            tasks_db = db.query(TaskDB).order_by(TaskDB.due_date, TaskDB.id).all()
            return [task_db.to_pydantic() for task_db in tasks_db]
