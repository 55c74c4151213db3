"""Wiring of a ready-to-use TaskService backed by the database."""

import logging
import os
from datetime import date
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.engine import Engine

from memobot.database.database import get_session_factory, init_db
from memobot.database.repository import TaskRepository
from memobot.engine.policy import SchedulingPolicy
from memobot.services.task_service import TaskService

logger = logging.getLogger(__name__)


def _seed_enabled() -> bool:
    return os.getenv("MEMOBOT_SEED_STARTER_TASK", "True").lower() == "true"


def build_task_service(
    policy: Optional[SchedulingPolicy] = None,
    *,
    engine_override: Engine = None,
    seed: Optional[bool] = None,
    today: Optional[date] = None,
) -> TaskService:
    """Initialize the database and return a TaskService over it.

    Args:
        policy: Scheduling policy (read from MEMOBOT_* env vars when omitted)
        engine_override: Engine to use instead of the DATABASE_URL engine
        seed: Insert the starter task into an empty store
            (MEMOBOT_SEED_STARTER_TASK when omitted, default true)
        today: Date used for the starter task (the local date when omitted)

    Returns:
        TaskService backed by a TaskRepository
    """
    load_dotenv()
    if policy is None:
        policy = SchedulingPolicy.from_env()

    imported = init_db(engine_override, policy.min_interval_days)
    service = TaskService(TaskRepository(get_session_factory(engine_override)), policy)

    if seed is None:
        seed = _seed_enabled()
    if seed and not imported:
        starter = service.seed_if_empty(today or date.today())
        if starter is not None:
            logger.info(f"Seeded starter task {starter.id}")
    return service
