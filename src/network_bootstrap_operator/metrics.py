"""Prometheus metrics for the Network Bootstrap Operator."""

from prometheus_client import Counter, Gauge, Histogram

# Bootstrap metrics
bootstrap_total = Counter(
    "network_bootstrap_operator_bootstrap_total",
    "Total number of domain suffix bootstrap runs",
    ["result"],
)

bootstrap_duration_seconds = Histogram(
    "network_bootstrap_operator_bootstrap_duration_seconds",
    "Duration of domain suffix bootstrap runs in seconds",
    buckets=[0.1, 1.0, 10.0, 60.0, 300.0, 600.0, 1200.0],
)

domain_suffix_configured = Gauge(
    "network_bootstrap_operator_domain_suffix_configured",
    "Whether a domain suffix is configured (1) or not (0)",
)

# Probe ingress metrics
probe_ingress_total = Counter(
    "network_bootstrap_operator_probe_ingress_total",
    "Total number of probe ingress operations",
    ["operation", "result"],
)

probe_ingress_wait_seconds = Histogram(
    "network_bootstrap_operator_probe_ingress_wait_seconds",
    "Time spent waiting for a probe ingress load-balancer address",
    buckets=[10.0, 30.0, 60.0, 120.0, 300.0, 600.0, 1200.0],
)

# Error metrics
error_total = Counter(
    "network_bootstrap_operator_error_total",
    "Total number of errors",
    ["kind", "error_type"],
)

# API call metrics
api_call_total = Counter(
    "network_bootstrap_operator_api_call_total",
    "Total number of API calls",
    ["api_type", "operation", "result"],
)

api_call_duration_seconds = Histogram(
    "network_bootstrap_operator_api_call_duration_seconds",
    "Duration of API calls in seconds",
    ["api_type", "operation"],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0],
)

rate_limit_hits_total = Counter(
    "network_bootstrap_operator_rate_limit_hits_total",
    "Total number of rate limit hits",
    ["api_type"],
)
