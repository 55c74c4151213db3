"""Constants for memobot.

This module centralizes the default scheduling knobs and starter data.
"""

# Scheduling defaults (see memobot.engine.policy for the env overrides)
DEFAULT_MIN_INTERVAL_DAYS = 1
DEFAULT_HARD_MULTIPLIER = 1.2
DEFAULT_EASY_MULTIPLIER = 2.5
DEFAULT_AGAIN_DELAY_DAYS = 0  # 0 = due again immediately
DEFAULT_MAX_INTERVAL_DAYS = 36500  # keeps due dates inside the calendar

# Multiplier products are rounded to this many decimals before ceil()
INTERVAL_ROUNDING_DIGITS = 6

# Starter task inserted into an empty store
STARTER_TASK_NAME = "Add a task"
STARTER_TASK_URL = "http://example.com"
