"""Polling helpers for waiting on cluster state."""

from __future__ import annotations

import time
from typing import Callable

from .errors import WaitTimeoutError


def poll_until(
    condition: Callable[[], bool],
    interval: float,
    timeout: float,
    immediate: bool = False,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
    timeout_error: type[WaitTimeoutError] = WaitTimeoutError,
) -> None:
    """Call ``condition`` every ``interval`` seconds until it returns True.

    Exceptions raised by ``condition`` abort the poll and propagate.

    Args:
        condition: Zero-argument callable returning True when done
        interval: Seconds between checks
        timeout: Seconds before giving up
        immediate: Check once before the first sleep
        sleep: Sleep function
        clock: Monotonic clock function
        timeout_error: Exception type raised on timeout

    Raises:
        WaitTimeoutError: If ``timeout`` elapses first
    """
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")

    deadline = clock() + timeout

    if immediate and condition():
        return

    while True:
        remaining = deadline - clock()
        if remaining <= 0:
            break
        sleep(min(interval, remaining))
        if condition():
            return
        if clock() >= deadline:
            break

    raise timeout_error(f"timed out after {timeout:g}s waiting for the condition")
