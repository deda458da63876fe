"""Ingress settings and load-balancer address discovery."""

from __future__ import annotations

import logging
import socket
import time
from typing import Any, Callable

from kubernetes import client
from kubernetes.client.exceptions import ApiException

from .. import metrics
from ..builders.ingress import IngressConfig, build_probe_ingress, create_ingress_config_from_data
from ..config import get_namespace, get_pod_name, get_poll_interval, get_wait_timeout
from ..constants import FIELD_MANAGER, KIND_INGRESS, LABEL_PROBE
from ..tracing import add_span_attribute, trace_span
from ..utils.errors import (
    IngressAddressError,
    IngressConfigError,
    NetworkConfigNotFoundError,
    IngressWaitTimeoutError,
    ProbeIngressError,
)
from ..utils.events import emit_probe_ingress_created, emit_probe_ingress_ready
from ..utils.rate_limit import call_with_rate_limit_retry
from ..utils.wait import poll_until
from .network_config import ConfigMapGetter, get_network_config_configmap

logger = logging.getLogger(__name__)


def get_ingress_config(configmap_getter: ConfigMapGetter) -> IngressConfig:
    """Read ingress settings from the network config.

    Raises:
        NetworkConfigNotFoundError: If the network config does not exist
        IngressConfigError: If the annotations value is invalid
    """
    configmap = get_network_config_configmap(configmap_getter)
    return create_ingress_config_from_data(configmap.data, configmap.metadata.name)


def create_probe_ingress(
    networking_api: client.NetworkingV1Api,
    ingress: client.V1Ingress,
) -> client.V1Ingress:
    """Create the probe ingress, reusing an existing probe on conflict.

    Raises:
        ProbeIngressError: If the ingress cannot be created or reused
    """
    namespace = ingress.metadata.namespace
    try:
        created = call_with_rate_limit_retry(
            networking_api.create_namespaced_ingress,
            namespace=namespace,
            body=ingress,
            field_manager=FIELD_MANAGER,
        )
        metrics.probe_ingress_total.labels(operation="create", result="success").inc()
        return created
    except ApiException as e:
        if e.status != 409:
            metrics.probe_ingress_total.labels(operation="create", result="error").inc()
            raise ProbeIngressError(f"failed to create ingress {ingress.metadata.generate_name}") from e

    metrics.probe_ingress_total.labels(operation="create", result="exists").inc()
    existing = find_probe_ingress(networking_api, namespace)
    if existing is None:
        raise ProbeIngressError(
            f"ingress {ingress.metadata.generate_name} already exists but no probe ingress was found"
        )
    logger.info(f"Reusing existing probe ingress {existing.metadata.name}")
    return existing


def find_probe_ingress(
    networking_api: client.NetworkingV1Api,
    namespace: str,
) -> client.V1Ingress | None:
    """Find a probe ingress left in ``namespace``, if any."""
    result = call_with_rate_limit_retry(
        networking_api.list_namespaced_ingress,
        namespace=namespace,
        label_selector=f"{LABEL_PROBE}=true",
    )
    items = result.items or []
    return items[0] if items else None


def delete_probe_ingress(
    networking_api: client.NetworkingV1Api,
    name: str,
    namespace: str,
) -> None:
    """Delete the probe ingress. Failures are logged and never raised."""
    try:
        call_with_rate_limit_retry(
            networking_api.delete_namespaced_ingress,
            name=name,
            namespace=namespace,
        )
        metrics.probe_ingress_total.labels(operation="delete", result="success").inc()
        logger.info(f"Deleted probe ingress {namespace}/{name}")
    except ApiException as e:
        if e.status == 404:
            metrics.probe_ingress_total.labels(operation="delete", result="not_found").inc()
            return
        metrics.probe_ingress_total.labels(operation="delete", result="error").inc()
        logger.warning(f"Failed to delete probe ingress {namespace}/{name}: status {e.status} {e.reason}")


def get_load_balancer_addresses(ingress: client.V1Ingress) -> list[Any]:
    """Load-balancer entries published in the ingress status."""
    status = ingress.status
    if status is None or status.load_balancer is None:
        return []
    return list(status.load_balancer.ingress or [])


def wait_for_load_balancer(
    networking_api: client.NetworkingV1Api,
    name: str,
    namespace: str,
    poll_interval: float,
    wait_timeout: float,
    sleep: Callable[[float], None] = time.sleep,
    clock: Callable[[], float] = time.monotonic,
) -> client.V1Ingress:
    """Poll the ingress until its status carries a load-balancer address.

    The first read happens one interval after the call. A read error stops
    polling immediately.

    Returns:
        The last read ingress

    Raises:
        ProbeIngressError: If the ingress cannot be read
        IngressWaitTimeoutError: If no address shows up within ``wait_timeout``
    """
    latest: dict[str, client.V1Ingress] = {}

    def has_address() -> bool:
        try:
            ingress = call_with_rate_limit_retry(
                networking_api.read_namespaced_ingress,
                name=name,
                namespace=namespace,
            )
        except ApiException as e:
            raise ProbeIngressError(f"failed to get ingress {name}") from e
        latest["ingress"] = ingress
        return len(get_load_balancer_addresses(ingress)) > 0

    start_time = time.time()
    try:
        poll_until(
            has_address,
            interval=poll_interval,
            timeout=wait_timeout,
            immediate=False,
            sleep=sleep,
            clock=clock,
            timeout_error=IngressWaitTimeoutError,
        )
    except IngressWaitTimeoutError as e:
        raise IngressWaitTimeoutError(f"failed to wait for ingress {name} to be ready: {e}") from e
    finally:
        metrics.probe_ingress_wait_seconds.observe(time.time() - start_time)

    return latest["ingress"]


def resolve_address(
    address: Any,
    ingress_name: str,
    resolver: Callable[[str], str] = socket.gethostbyname,
) -> str:
    """Turn a load-balancer status entry into an IPv4 address.

    The entry's ``ip`` wins; otherwise its ``hostname`` is resolved.

    Raises:
        IngressAddressError: If there is neither, or the hostname does not resolve
    """
    ip = (getattr(address, "ip", None) or "").strip()
    if ip:
        return ip

    hostname = (getattr(address, "hostname", None) or "").strip()
    if not hostname:
        raise IngressAddressError(f"the ingress {ingress_name} status has no IP or hostname")

    try:
        return resolver(hostname)
    except OSError as e:
        raise IngressAddressError(f"failed to resolve ip address for hostname {hostname}") from e


def get_ingress_ip(
    configmap_getter: ConfigMapGetter,
    networking_api: client.NetworkingV1Api,
    namespace: str | None = None,
    pod_name: str | None = None,
    poll_interval: float | None = None,
    wait_timeout: float | None = None,
    sleep: Callable[[float], None] = time.sleep,
    resolver: Callable[[str], str] = socket.gethostbyname,
    event_body: dict[str, Any] | None = None,
) -> str:
    """Discover the ingress load-balancer IP with a throwaway probe ingress.

    The probe ingress is deleted on every exit path.

    Args:
        configmap_getter: Callable fetching a ConfigMap by namespace and name
        networking_api: NetworkingV1 API client
        namespace: Namespace for the probe (defaults to the operator namespace)
        pod_name: Used to build the probe host (defaults to POD_NAME or a random label)
        poll_interval: Seconds between status reads
        wait_timeout: Seconds before giving up
        sleep: Sleep function used while polling
        resolver: Hostname to IPv4 resolver
        event_body: Object to attach progress events to, if any

    Returns:
        IPv4 address of the ingress load balancer
    """
    namespace = namespace or get_namespace()
    pod_name = pod_name or get_pod_name()
    poll_interval = get_poll_interval() if poll_interval is None else poll_interval
    wait_timeout = get_wait_timeout() if wait_timeout is None else wait_timeout

    try:
        ingress_config = get_ingress_config(configmap_getter)
    except (NetworkConfigNotFoundError, ApiException) as e:
        raise IngressConfigError(f"failed to get ingress config: {e}") from e
    probe = build_probe_ingress(ingress_config, namespace, pod_name)

    with trace_span("probe_ingress", kind=KIND_INGRESS, attributes={"ingress.namespace": namespace}):
        logger.info(f"Creating ingress {probe.metadata.generate_name} to get an ingress IP automatically")
        ingress = create_probe_ingress(networking_api, probe)
        ingress_name = ingress.metadata.name
        add_span_attribute("ingress.name", ingress_name)
        if event_body is not None:
            emit_probe_ingress_created(event_body, ingress_name)

        try:
            logger.info(f"Waiting for ingress {ingress_name} to be ready")
            ingress = wait_for_load_balancer(
                networking_api,
                ingress_name,
                namespace,
                poll_interval=poll_interval,
                wait_timeout=wait_timeout,
                sleep=sleep,
            )
            logger.info(f"Ingress {ingress_name} is ready")

            address = get_load_balancer_addresses(ingress)[0]
            ip = resolve_address(address, ingress_name, resolver=resolver)
        finally:
            delete_probe_ingress(networking_api, ingress_name, namespace)

    if event_body is not None:
        emit_probe_ingress_ready(event_body, ingress_name, ip)
    return ip
