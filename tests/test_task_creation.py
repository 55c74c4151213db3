"""Tests for task creation defaults and service bootstrap."""

import pytest
from datetime import date
from sqlalchemy import create_engine

from memobot.engine.policy import SchedulingPolicy
from memobot.models.task import Task
from memobot.models.task_factory import create_task_base, create_task_defaults, normalize_url
from memobot.services.bootstrap import build_task_service


class TestTaskCreationDefaults:
    """Test that task creation uses correct default values."""

    def test_default_recurrence_state(self, today):
        """New tasks start at the floor with no streak and are due on creation."""
        task = create_task_base("Read paper", today)

        assert task.interval_days == 1
        assert task.streak == 0
        assert task.due_date == today
        assert task.last_rated_on is None
        assert task.url is None

    def test_defaults_follow_floor(self):
        """The initial interval is the given floor."""
        assert create_task_defaults(4)["interval_days"] == 4

    def test_explicit_id(self, today):
        """An explicit id is kept."""
        assert create_task_base("Read paper", today, task_id="t-1").id == "t-1"

    @pytest.mark.parametrize("raw, expected", [
        (None, None),
        ("", None),
        ("   ", None),
        (" https://example.com ", "https://example.com"),
    ])
    def test_normalize_url(self, raw, expected):
        """Blank links become None, others are stripped."""
        assert normalize_url(raw) == expected

    def test_task_requires_name(self, sample_task_base):
        """The model itself rejects an empty name."""
        with pytest.raises(ValueError):
            Task(**{**sample_task_base, "name": ""})

    def test_recurrence_state(self, sample_task):
        """recurrence_state() exposes only the scheduling fields."""
        state = sample_task.recurrence_state()

        assert state.interval_days == sample_task.interval_days
        assert state.streak == sample_task.streak
        assert state.due_date == sample_task.due_date


class TestBuildTaskService:
    """Test build_task_service() wiring."""

    @pytest.fixture
    def file_engine(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'home' / 'db.sqlite'}")
        try:
            yield engine
        finally:
            engine.dispose()

    def test_seeds_starter_task(self, file_engine):
        """An empty database gets the starter task once."""
        day = date(2025, 4, 8)
        service = build_task_service(SchedulingPolicy(), engine_override=file_engine, seed=True, today=day)

        tasks = service.list_tasks()
        assert [t.name for t in tasks] == ["Add a task"]
        assert tasks[0].due_date == day

        again = build_task_service(SchedulingPolicy(), engine_override=file_engine, seed=True, today=day)
        assert len(again.list_tasks()) == 1

    def test_seed_disabled(self, file_engine):
        """seed=False leaves the database empty."""
        service = build_task_service(SchedulingPolicy(), engine_override=file_engine, seed=False)
        assert service.list_tasks() == []

    def test_seed_from_env(self, file_engine, monkeypatch):
        """MEMOBOT_SEED_STARTER_TASK=false disables seeding."""
        monkeypatch.setenv("MEMOBOT_SEED_STARTER_TASK", "false")
        service = build_task_service(SchedulingPolicy(), engine_override=file_engine)
        assert service.list_tasks() == []

    def test_policy_from_env(self, file_engine, monkeypatch):
        """Without an explicit policy the MEMOBOT_* variables are used."""
        monkeypatch.setenv("MEMOBOT_MIN_INTERVAL_DAYS", "2")
        service = build_task_service(engine_override=file_engine, seed=False)

        assert service.policy.min_interval_days == 2
        assert service.create_task("Read paper", now=date(2025, 4, 8)).interval_days == 2
