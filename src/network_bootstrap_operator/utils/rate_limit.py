"""Rate limiting utilities for API calls."""

from __future__ import annotations

import os
import threading
import time
from functools import wraps
from typing import Any, Callable, TypeVar

from kubernetes.client.exceptions import ApiException

from .. import metrics

_F = TypeVar("_F", bound=Callable[..., Any])

# Rate limit configuration
_K8S_RATE_LIMIT_PER_SECOND = float(os.getenv("K8S_RATE_LIMIT_PER_SECOND", "10.0"))

# Track last call time
_k8s_last_call_time: float = 0.0
_k8s_lock = threading.Lock()


def rate_limit_k8s(func: _F) -> _F:
    """Decorator to rate limit Kubernetes API calls.

    Enforces a minimum interval between calls so the bootstrap never
    floods the Kubernetes API server.
    """
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        global _k8s_last_call_time
        min_interval = 1.0 / _K8S_RATE_LIMIT_PER_SECOND

        # Handlers run on several worker threads
        with _k8s_lock:
            time_since_last_call = time.time() - _k8s_last_call_time
            if time_since_last_call < min_interval:
                time.sleep(min_interval - time_since_last_call)

            _k8s_last_call_time = time.time()
        return func(*args, **kwargs)

    return wrapper  # type: ignore


def is_rate_limit_error(e: Exception) -> bool:
    """Check whether an exception is a Kubernetes rate limit response."""
    if not isinstance(e, ApiException):
        return False
    # Kubernetes API rate limit errors typically return 429 or 503
    return e.status == 429 or (e.status == 503 and "rate limit" in str(e).lower())


def call_with_rate_limit_retry(
    func: Callable[..., Any],
    *args: Any,
    max_retries: int = 3,
    **kwargs: Any,
) -> Any:
    """Call a rate-limited Kubernetes API function, retrying on rate limit errors.

    Exponential backoff: 1s, 2s, 4s. Non rate-limit errors propagate at once.

    Args:
        func: Kubernetes API method
        max_retries: Maximum number of retries after a rate limit error

    Returns:
        The API call result
    """
    attempt = 0
    while True:
        try:
            return rate_limit_k8s(func)(*args, **kwargs)
        except ApiException as e:
            if not is_rate_limit_error(e) or attempt >= max_retries:
                raise
            metrics.rate_limit_hits_total.labels(api_type="k8s").inc()
            time.sleep(2 ** attempt)
            attempt += 1
