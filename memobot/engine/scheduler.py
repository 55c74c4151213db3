"""Scheduling engine for memobot.

Maps a task's recurrence state and a rating to its successor state.
Pure computation: no storage, no identifiers, no clock. The caller passes
`now` explicitly, so the same inputs always produce the same outputs.
"""

import math
from datetime import date, datetime, timedelta
from typing import Union

from memobot.errors import InvalidRatingError, InvalidStateError
from memobot.models.constants import INTERVAL_ROUNDING_DIGITS
from memobot.models.task import Rating, RecurrenceState
from memobot.engine.policy import DEFAULT_POLICY, SchedulingPolicy


def to_day(value: Union[date, datetime]) -> date:
    """Truncate a timestamp to date granularity.

    Args:
        value: date or datetime

    Returns:
        The calendar date of value
    """
    # datetime is a subclass of date, so test it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected date or datetime, got {type(value).__name__}")


def parse_rating(value: Union[Rating, str]) -> Rating:
    """Convert user input into a Rating.

    Accepts a Rating or its string value (case-insensitive). Numeric codes
    and every other value are rejected.

    Raises:
        InvalidRatingError: If value is not easy, hard or again
    """
    if isinstance(value, Rating):
        return value
    if not isinstance(value, str):
        raise InvalidRatingError(value)
    try:
        return Rating(value.strip().lower())
    except ValueError:
        raise InvalidRatingError(value) from None


def validate_state(state: RecurrenceState, policy: SchedulingPolicy = DEFAULT_POLICY) -> None:
    """Reject corrupt recurrence state instead of repairing it.

    Raises:
        InvalidStateError: If the interval is below the floor or the streak is negative
    """
    if state.interval_days < policy.min_interval_days:
        raise InvalidStateError(
            f"interval_days={state.interval_days} is below the minimum of {policy.min_interval_days}"
        )
    if state.streak < 0:
        raise InvalidStateError(f"streak={state.streak} is negative")


def grow_interval(interval_days: int, multiplier: float, policy: SchedulingPolicy = DEFAULT_POLICY) -> int:
    """Grow an interval by multiplier, never below floor + 1 day.

    Args:
        interval_days: Current interval
        multiplier: Growth factor (> 1)
        policy: Active scheduling policy

    Returns:
        New interval in whole days, capped at policy.max_interval_days
        (never below interval_days while interval_days is within the cap)
    """
    grown = math.ceil(round(interval_days * multiplier, INTERVAL_ROUNDING_DIGITS))
    return min(max(grown, policy.min_interval_days + 1), policy.max_interval_days)


def next_recurrence_state(
    state: RecurrenceState,
    rating: Union[Rating, str],
    now: Union[date, datetime],
    policy: SchedulingPolicy = DEFAULT_POLICY,
) -> RecurrenceState:
    """Compute the recurrence state that follows a rating.

    - again: streak resets to 0, interval to the floor, due after again_delay_days
    - hard: streak + 1, interval grows by hard_multiplier, due now + interval
    - easy: streak + 1, interval grows by easy_multiplier, due now + interval

    For a fixed starting state: due(again) < due(hard) <= due(easy).

    Args:
        state: Current recurrence state
        rating: easy, hard or again
        now: Current time (truncated to its date)
        policy: Active scheduling policy

    Returns:
        New RecurrenceState with due_date >= now

    Raises:
        InvalidRatingError: If rating is not recognised
        InvalidStateError: If state is corrupt
    """
    rating = parse_rating(rating)
    validate_state(state, policy)
    today = to_day(now)

    if rating == Rating.AGAIN:
        return RecurrenceState(
            interval_days=policy.min_interval_days,
            streak=0,
            due_date=today + timedelta(days=policy.again_delay_days),
        )

    if rating == Rating.HARD:
        interval_days = grow_interval(state.interval_days, policy.hard_multiplier, policy)
    elif rating == Rating.EASY:
        interval_days = grow_interval(state.interval_days, policy.easy_multiplier, policy)
    else:
        raise InvalidRatingError(rating)

    return RecurrenceState(
        interval_days=interval_days,
        streak=state.streak + 1,
        due_date=today + timedelta(days=interval_days),
    )
