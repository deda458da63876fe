"""Environment-driven settings for the Network Bootstrap Operator."""

from __future__ import annotations

import logging
import os
import uuid
from pathlib import Path

from .constants import (
    DEFAULT_MAGIC_DNS,
    DEFAULT_NAMESPACE,
    DEFAULT_NETWORK_CONFIG_NAME,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_WAIT_TIMEOUT,
    SERVICE_ACCOUNT_NAMESPACE_PATH,
)

logger = logging.getLogger(__name__)


def get_namespace() -> str:
    """Get the namespace the operator (and its network config) lives in.

    Resolution order: ``OPERATOR_NAMESPACE`` env var, the in-cluster service
    account namespace file, then ``default``.
    """
    namespace = os.getenv("OPERATOR_NAMESPACE", "").strip()
    if namespace:
        return namespace

    namespace_path = Path(SERVICE_ACCOUNT_NAMESPACE_PATH)
    try:
        with namespace_path.open() as f:
            namespace = f.read().strip()
    except FileNotFoundError:
        namespace = ""

    if namespace:
        return namespace

    logger.debug(f"Falling back to namespace {DEFAULT_NAMESPACE}")
    return DEFAULT_NAMESPACE


def get_magic_dns() -> str:
    """Get the wildcard DNS service used to build domain suffixes."""
    return os.getenv("MAGIC_DNS", "").strip() or DEFAULT_MAGIC_DNS


def get_pod_name() -> str:
    """Get the operator pod name, or a random DNS-safe label outside a pod."""
    pod_name = os.getenv("POD_NAME", "").strip()
    if pod_name:
        return pod_name
    # Must start with a letter to be a valid DNS label
    return f"a{uuid.uuid4().hex[:20]}"


def get_network_config_name() -> str:
    """Get the name of the network config ConfigMap."""
    return os.getenv("NETWORK_CONFIG_NAME", "").strip() or DEFAULT_NETWORK_CONFIG_NAME


def get_poll_interval() -> float:
    """Seconds between probe ingress status checks."""
    return float(os.getenv("INGRESS_POLL_INTERVAL_SECONDS", str(DEFAULT_POLL_INTERVAL)))


def get_wait_timeout() -> float:
    """Seconds to wait for the probe ingress to get a load-balancer address."""
    return float(os.getenv("INGRESS_WAIT_TIMEOUT_SECONDS", str(DEFAULT_WAIT_TIMEOUT)))


def get_retry_delay() -> float:
    """Seconds kopf waits before retrying a failed bootstrap."""
    return float(os.getenv("BOOTSTRAP_RETRY_DELAY_SECONDS", "60"))
