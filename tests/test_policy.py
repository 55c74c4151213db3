"""Tests for SchedulingPolicy validation and environment loading."""

import pytest
from pydantic import ValidationError

from memobot.engine.policy import SchedulingPolicy, DEFAULT_POLICY


class TestSchedulingPolicy:
    """Test SchedulingPolicy constraints."""

    def test_defaults(self):
        """Default policy matches the documented constants."""
        assert DEFAULT_POLICY.min_interval_days == 1
        assert DEFAULT_POLICY.hard_multiplier == 1.2
        assert DEFAULT_POLICY.easy_multiplier == 2.5
        assert DEFAULT_POLICY.again_delay_days == 0
        assert DEFAULT_POLICY.max_interval_days == 36500

    def test_easy_must_exceed_hard(self):
        """easy_multiplier <= hard_multiplier is rejected."""
        with pytest.raises(ValidationError, match="easy_multiplier"):
            SchedulingPolicy(hard_multiplier=2.0, easy_multiplier=2.0)

    def test_multipliers_must_grow(self):
        """A multiplier of 1.0 or less is rejected."""
        with pytest.raises(ValidationError):
            SchedulingPolicy(hard_multiplier=1.0)

    def test_floor_must_be_positive(self):
        """min_interval_days must be at least 1."""
        with pytest.raises(ValidationError):
            SchedulingPolicy(min_interval_days=0)

    def test_again_delay_cannot_exceed_floor(self):
        """again_delay_days above the floor would let again overtake hard."""
        with pytest.raises(ValidationError, match="again_delay_days"):
            SchedulingPolicy(min_interval_days=1, again_delay_days=2)

    @pytest.mark.parametrize("cap", [2, 3])
    def test_cap_must_exceed_floor_plus_one(self, cap):
        """max_interval_days must leave room above floor + 1."""
        with pytest.raises(ValidationError, match="max_interval_days"):
            SchedulingPolicy(min_interval_days=2, max_interval_days=cap)


class TestFromEnv:
    """Test SchedulingPolicy.from_env()."""

    def test_empty_env_uses_defaults(self):
        """No variables set gives the default policy."""
        assert SchedulingPolicy.from_env({}) == SchedulingPolicy()

    def test_reads_all_variables(self):
        """Every MEMOBOT_* variable is parsed into its field."""
        policy = SchedulingPolicy.from_env({
            "MEMOBOT_MIN_INTERVAL_DAYS": "2",
            "MEMOBOT_HARD_MULTIPLIER": "1.5",
            "MEMOBOT_EASY_MULTIPLIER": "3",
            "MEMOBOT_AGAIN_DELAY_DAYS": "1",
            "MEMOBOT_MAX_INTERVAL_DAYS": "400",
        })

        assert policy.min_interval_days == 2
        assert policy.hard_multiplier == 1.5
        assert policy.easy_multiplier == 3.0
        assert policy.again_delay_days == 1
        assert policy.max_interval_days == 400

    def test_blank_values_are_ignored(self):
        """Blank variables fall back to the default."""
        policy = SchedulingPolicy.from_env({"MEMOBOT_EASY_MULTIPLIER": "  "})
        assert policy.easy_multiplier == 2.5

    def test_invalid_values_raise(self):
        """Unparseable values surface as a ValidationError."""
        with pytest.raises(ValidationError):
            SchedulingPolicy.from_env({"MEMOBOT_MIN_INTERVAL_DAYS": "soon"})

    def test_reads_os_environ(self, monkeypatch):
        """Without an explicit mapping, os.environ is used."""
        monkeypatch.setenv("MEMOBOT_HARD_MULTIPLIER", "1.3")
        assert SchedulingPolicy.from_env().hard_multiplier == 1.3
