"""Pytest fixtures and configuration for memobot tests."""

import pytest
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
import uuid

from memobot.database.database import Base
from memobot.database import models  # noqa: F401  registers TaskDB on Base
from memobot.database.repository import TaskRepository
from memobot.database.store import InMemoryTaskStore
from memobot.engine.policy import SchedulingPolicy
from memobot.models.task import Task
from memobot.services.task_service import TaskService


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def today():
    """Fixed 'now' so tests never depend on the wall clock."""
    return date(2025, 4, 8)


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh in-memory SQLite engine with the schema applied."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def task_repository(session_factory):
    """Create a TaskRepository instance for testing."""
    return TaskRepository(session_factory)


@pytest.fixture
def memory_store():
    """Create an InMemoryTaskStore instance for testing."""
    return InMemoryTaskStore()


@pytest.fixture
def policy():
    """Default scheduling policy (floor 1 day, hard x1.2, easy x2.5)."""
    return SchedulingPolicy()


@pytest.fixture
def task_service(task_repository, policy):
    """TaskService backed by the SQLite repository."""
    return TaskService(task_repository, policy)


@pytest.fixture
def memory_service(memory_store, policy):
    """TaskService backed by the in-memory store."""
    return TaskService(memory_store, policy)


@pytest.fixture
def sample_task_base(today):
    """Base task data for creating test tasks.

    Returns a dict with default task attributes that can be overridden.
    """
    return {
        "id": str(uuid.uuid4()),
        "name": "Read paper",
        "url": "https://example.com/paper.pdf",
        "due_date": today,
        "interval_days": 1,
        "streak": 0,
        "last_rated_on": None,
    }


@pytest.fixture
def sample_task(sample_task_base):
    """Create a sample Task object for testing."""
    return Task(**sample_task_base)
