"""Scheduling policy for memobot.

Holds the tunable constants of the scheduling engine. Only the ordering of
outcomes is fixed (again < hard <= easy); the magnitudes can be changed via
environment variables.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from memobot.models.constants import (
    DEFAULT_MIN_INTERVAL_DAYS,
    DEFAULT_HARD_MULTIPLIER,
    DEFAULT_EASY_MULTIPLIER,
    DEFAULT_AGAIN_DELAY_DAYS,
    DEFAULT_MAX_INTERVAL_DAYS,
)


class SchedulingPolicy(BaseModel):
    """Interval floor and cap, growth multipliers and the again delay."""

    min_interval_days: int = Field(DEFAULT_MIN_INTERVAL_DAYS, ge=1, description="Interval floor in days")
    hard_multiplier: float = Field(DEFAULT_HARD_MULTIPLIER, gt=1.0, description="Interval growth on 'hard'")
    easy_multiplier: float = Field(DEFAULT_EASY_MULTIPLIER, gt=1.0, description="Interval growth on 'easy'")
    again_delay_days: int = Field(DEFAULT_AGAIN_DELAY_DAYS, ge=0, description="Days until due after 'again'")
    max_interval_days: int = Field(DEFAULT_MAX_INTERVAL_DAYS, description="Interval cap in days")

    @field_validator("easy_multiplier")
    @classmethod
    def _validate_easy_multiplier(cls, v, info):
        hard = info.data.get("hard_multiplier")
        if hard is not None and v <= hard:
            raise ValueError("easy_multiplier must be > hard_multiplier")
        return v

    @field_validator("again_delay_days")
    @classmethod
    def _validate_again_delay_days(cls, v, info):
        # hard/easy never schedule sooner than floor + 1, so again stays strictly earliest
        floor = info.data.get("min_interval_days")
        if floor is not None and v > floor:
            raise ValueError("again_delay_days must be <= min_interval_days")
        return v

    @field_validator("max_interval_days")
    @classmethod
    def _validate_max_interval_days(cls, v, info):
        floor = info.data.get("min_interval_days")
        if floor is not None and v <= floor + 1:
            raise ValueError("max_interval_days must be > min_interval_days + 1")
        return v

    @classmethod
    def from_env(cls, env: Optional[dict] = None) -> "SchedulingPolicy":
        """Build a policy from MEMOBOT_* environment variables.

        Args:
            env: Mapping to read instead of os.environ (mainly for tests)

        Returns:
            Validated policy; unset variables fall back to the defaults
        """
        if env is None:
            load_dotenv()
            env = os.environ

        values = {}
        for field_name, env_name in _ENV_VARS.items():
            raw = env.get(env_name)
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls(**values)


_ENV_VARS = {
    "min_interval_days": "MEMOBOT_MIN_INTERVAL_DAYS",
    "hard_multiplier": "MEMOBOT_HARD_MULTIPLIER",
    "easy_multiplier": "MEMOBOT_EASY_MULTIPLIER",
    "again_delay_days": "MEMOBOT_AGAIN_DELAY_DAYS",
    "max_interval_days": "MEMOBOT_MAX_INTERVAL_DAYS",
}

DEFAULT_POLICY = SchedulingPolicy()
