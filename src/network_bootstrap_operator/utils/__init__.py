"""Utility functions for the Network Bootstrap Operator."""

from .cache import (
    get_cached_object,
    invalidate_cache,
    make_cache_key,
    set_cached_object,
)
from .context import (
    get_context_dict,
    get_correlation_id,
    propagate_trace_context,
    set_correlation_id,
    with_correlation_id,
)
from .errors import (
    DomainSuffixPersistError,
    IngressAddressError,
    IngressConfigError,
    IngressWaitTimeoutError,
    NetworkBootstrapError,
    NetworkConfigNotFoundError,
    ProbeIngressError,
    WaitTimeoutError,
    sanitize_exception,
)
from .events import emit_event
from .rate_limit import call_with_rate_limit_retry, is_rate_limit_error, rate_limit_k8s
from .wait import poll_until

__all__ = [
    "emit_event",
    "get_cached_object",
    "set_cached_object",
    "invalidate_cache",
    "make_cache_key",
    "rate_limit_k8s",
    "is_rate_limit_error",
    "call_with_rate_limit_retry",
    "poll_until",
    "set_correlation_id",
    "get_correlation_id",
    "with_correlation_id",
    "get_context_dict",
    "propagate_trace_context",
    "sanitize_exception",
    "NetworkBootstrapError",
    "NetworkConfigNotFoundError",
    "IngressConfigError",
    "ProbeIngressError",
    "WaitTimeoutError",
    "IngressWaitTimeoutError",
    "IngressAddressError",
    "DomainSuffixPersistError",
]
