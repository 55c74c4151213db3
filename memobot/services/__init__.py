"""Task service layer for memobot."""

from memobot.services.task_service import TaskService
from memobot.services.bootstrap import build_task_service

__all__ = [
    "TaskService",
    "build_task_service",
]
