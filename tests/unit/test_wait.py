"""Tests for the poll helper."""

from __future__ import annotations

import pytest

from network_bootstrap_operator.utils.errors import IngressWaitTimeoutError, WaitTimeoutError
from network_bootstrap_operator.utils.wait import poll_until


class FakeClock:
    """Clock advanced only by the fake sleep."""

    def __init__(self):
        self.now = 0.0
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestPollUntil:
    """Test cases for poll_until."""

    def test_waits_one_interval_before_first_check(self):
        """Test that the first check happens after one interval."""
        clock = FakeClock()
        checks = []

        def condition():
            checks.append(clock.now)
            return True

        poll_until(condition, interval=10, timeout=60, sleep=clock.sleep, clock=clock)

        assert checks == [10]
        assert clock.sleeps == [10]

    def test_immediate_checks_before_sleeping(self):
        """Test that immediate=True checks right away."""
        clock = FakeClock()

        poll_until(lambda: True, interval=10, timeout=60, immediate=True, sleep=clock.sleep, clock=clock)

        assert clock.sleeps == []

    def test_polls_until_condition_holds(self):
        """Test that polling continues until the condition is met."""
        clock = FakeClock()
        results = iter([False, False, True])

        poll_until(lambda: next(results), interval=5, timeout=60, sleep=clock.sleep, clock=clock)

        assert clock.sleeps == [5, 5, 5]

    def test_times_out(self):
        """Test that a condition that never holds raises WaitTimeoutError."""
        clock = FakeClock()
        calls = []

        def condition():
            calls.append(clock.now)
            return False

        with pytest.raises(WaitTimeoutError):
            poll_until(condition, interval=10, timeout=35, sleep=clock.sleep, clock=clock)

        # Checks at 10, 20, 30 and a final one at the 35s deadline
        assert calls == [10, 20, 30, 35]
        assert clock.now == 35

    def test_custom_timeout_error(self):
        """Test that the timeout error type can be chosen."""
        clock = FakeClock()

        with pytest.raises(IngressWaitTimeoutError):
            poll_until(
                lambda: False,
                interval=1,
                timeout=2,
                sleep=clock.sleep,
                clock=clock,
                timeout_error=IngressWaitTimeoutError,
            )

    def test_zero_timeout_never_checks(self):
        """Test that a zero timeout fails without calling the condition."""
        clock = FakeClock()
        calls = []

        with pytest.raises(WaitTimeoutError):
            poll_until(lambda: calls.append(1) or True, interval=1, timeout=0, sleep=clock.sleep, clock=clock)

        assert calls == []

    def test_condition_error_propagates(self):
        """Test that an exception from the condition aborts the poll."""
        clock = FakeClock()

        def condition():
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            poll_until(condition, interval=1, timeout=60, sleep=clock.sleep, clock=clock)

        assert clock.sleeps == [1]

    def test_rejects_non_positive_interval(self):
        """Test that a non-positive interval is rejected."""
        with pytest.raises(ValueError):
            poll_until(lambda: True, interval=0, timeout=1)
