"""Scheduling engine for memobot."""

from memobot.engine.policy import SchedulingPolicy, DEFAULT_POLICY
from memobot.engine.scheduler import next_recurrence_state, parse_rating, validate_state, to_day
from memobot.engine.due import is_due, select_due, order_by_due_date

__all__ = [
    "SchedulingPolicy",
    "DEFAULT_POLICY",
    "next_recurrence_state",
    "parse_rating",
    "validate_state",
    "to_day",
    "is_due",
    "select_due",
    "order_by_due_date",
]
