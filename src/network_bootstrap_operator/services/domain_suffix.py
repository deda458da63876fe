"""Domain suffix derivation and persistence."""

from __future__ import annotations

import logging
import socket
import time
from typing import Any, Callable

from kubernetes import client

from .. import health, metrics
from ..config import get_magic_dns
from ..constants import KEY_DOMAIN_SUFFIX, KIND_CONFIG_MAP
from ..tracing import add_span_attribute, trace_span
from ..utils.events import emit_domain_suffix_generated
from .ingress import get_ingress_ip
from .network_config import (
    ConfigMapGetter,
    get_domain_suffix_value,
    get_network_config_configmap,
    patch_domain_suffix,
)

logger = logging.getLogger(__name__)


def build_domain_suffix(ip: str, magic_dns: str) -> str:
    """Domain suffix for an IP under a wildcard DNS service, e.g. ``1.2.3.4.sslip.io``."""
    return f"{ip}.{magic_dns}"


def get_domain_suffix(
    configmap_getter: ConfigMapGetter,
    core_api: client.CoreV1Api,
    networking_api: client.NetworkingV1Api,
    sleep: Callable[[float], None] = time.sleep,
    resolver: Callable[[str], str] = socket.gethostbyname,
    event_body: dict[str, Any] | None = None,
) -> str:
    """Return the configured domain suffix, deriving and storing it when unset.

    A suffix already present in the network config is returned unchanged and
    nothing is created or patched. Otherwise the ingress load-balancer IP is
    discovered and ``<ip>.<magic-dns>`` is written back to the network config.

    Args:
        configmap_getter: Callable fetching a ConfigMap by namespace and name
        core_api: CoreV1 API client, used to patch the network config
        networking_api: NetworkingV1 API client, used for the probe ingress
        sleep: Sleep function used while polling
        resolver: Hostname to IPv4 resolver
        event_body: Object to attach progress events to, if any

    Returns:
        The domain suffix
    """
    configmap = get_network_config_configmap(configmap_getter, use_cache=False)

    domain_suffix = get_domain_suffix_value(configmap)
    if domain_suffix:
        logger.info(f"The {KEY_DOMAIN_SUFFIX} in the network config is already set to `{domain_suffix}`")
        return domain_suffix

    magic_dns = get_magic_dns()

    ip = get_ingress_ip(
        configmap_getter,
        networking_api,
        sleep=sleep,
        resolver=resolver,
        event_body=event_body,
    )

    # A suffix set while the probe was waiting is never replaced
    configmap = get_network_config_configmap(configmap_getter, use_cache=False)
    existing = get_domain_suffix_value(configmap)
    if existing:
        logger.info(f"The {KEY_DOMAIN_SUFFIX} in the network config was set to `{existing}` during discovery")
        return existing

    domain_suffix = build_domain_suffix(ip, magic_dns)

    logger.info(
        f"you have not set the {KEY_DOMAIN_SUFFIX} in the network config, so use magic DNS to generate "
        f"a domain suffix automatically: `{domain_suffix}`, and set it to the network config"
    )

    patch_domain_suffix(core_api, configmap, domain_suffix)
    if event_body is not None:
        emit_domain_suffix_generated(event_body, domain_suffix)

    return domain_suffix


def ensure_domain_suffix(
    configmap_getter: ConfigMapGetter,
    core_api: client.CoreV1Api,
    networking_api: client.NetworkingV1Api,
    event_body: dict[str, Any] | None = None,
    sleep: Callable[[float], None] = time.sleep,
    resolver: Callable[[str], str] = socket.gethostbyname,
) -> str:
    """Run ``get_domain_suffix`` with tracing, metrics and readiness reporting."""
    start_time = time.time()
    with trace_span("ensure_domain_suffix", kind=KIND_CONFIG_MAP):
        try:
            domain_suffix = get_domain_suffix(
                configmap_getter,
                core_api,
                networking_api,
                sleep=sleep,
                resolver=resolver,
                event_body=event_body,
            )
        except Exception as e:
            metrics.bootstrap_total.labels(result="error").inc()
            metrics.domain_suffix_configured.set(0)
            metrics.error_total.labels(kind=KIND_CONFIG_MAP, error_type=type(e).__name__).inc()
            raise
        finally:
            metrics.bootstrap_duration_seconds.observe(time.time() - start_time)
        add_span_attribute("domain.suffix", domain_suffix)

    metrics.bootstrap_total.labels(result="success").inc()
    metrics.domain_suffix_configured.set(1)
    health.set_domain_suffix(domain_suffix)
    return domain_suffix
