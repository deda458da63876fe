"""Access to the shared network config ConfigMap."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable

from kubernetes import client
from kubernetes.client.exceptions import ApiException

from .. import metrics
from ..config import get_namespace, get_network_config_name
from ..constants import CONTROLLER_NAME, FIELD_MANAGER, KEY_DOMAIN_SUFFIX, KIND_CONFIG_MAP, LABEL_MANAGED_BY
from ..utils.cache import get_cached_object, invalidate_cache, make_cache_key, set_cached_object
from ..utils.errors import DomainSuffixPersistError, NetworkConfigNotFoundError
from ..utils.rate_limit import call_with_rate_limit_retry

logger = logging.getLogger(__name__)

# (namespace, name) -> ConfigMap
ConfigMapGetter = Callable[[str, str], client.V1ConfigMap]


def make_configmap_getter(core_api: client.CoreV1Api) -> ConfigMapGetter:
    """Build a ConfigMap getter backed by the CoreV1 API."""

    def configmap_getter(namespace: str, name: str) -> client.V1ConfigMap:
        return core_api.read_namespaced_config_map(name=name, namespace=namespace)

    return configmap_getter


def get_network_config_configmap(
    configmap_getter: ConfigMapGetter,
    namespace: str | None = None,
    name: str | None = None,
    use_cache: bool = True,
) -> client.V1ConfigMap:
    """Get the network config ConfigMap.

    Args:
        configmap_getter: Callable fetching a ConfigMap by namespace and name
        namespace: ConfigMap namespace (defaults to the operator namespace)
        name: ConfigMap name (defaults to the configured network config name)
        use_cache: Serve from the TTL cache when possible

    Returns:
        The ConfigMap

    Raises:
        NetworkConfigNotFoundError: If the ConfigMap does not exist
        ApiException: On other API errors
    """
    namespace = namespace or get_namespace()
    name = name or get_network_config_name()

    cache_key = make_cache_key(KIND_CONFIG_MAP, namespace, name)
    if use_cache:
        cached = get_cached_object(cache_key)
        if cached is not None:
            metrics.api_call_total.labels(api_type="k8s", operation="get_network_config", result="cache_hit").inc()
            return cached

    start_time = time.time()
    try:
        configmap = call_with_rate_limit_retry(configmap_getter, namespace, name)
        metrics.api_call_total.labels(api_type="k8s", operation="get_network_config", result="success").inc()
    except ApiException as e:
        metrics.api_call_total.labels(api_type="k8s", operation="get_network_config", result="error").inc()
        if e.status == 404:
            raise NetworkConfigNotFoundError(
                f"configmap {name} not found in namespace {namespace}"
            ) from e
        raise
    finally:
        duration = time.time() - start_time
        metrics.api_call_duration_seconds.labels(api_type="k8s", operation="get_network_config").observe(duration)

    set_cached_object(cache_key, configmap)
    return configmap


def ensure_network_config_configmap(
    core_api: client.CoreV1Api,
    namespace: str | None = None,
    name: str | None = None,
) -> tuple[client.V1ConfigMap, bool]:
    """Create the network config ConfigMap, or reuse the one that exists.

    Args:
        core_api: CoreV1 API client
        namespace: ConfigMap namespace (defaults to the operator namespace)
        name: ConfigMap name (defaults to the configured network config name)

    Returns:
        Tuple of (ConfigMap, created)
    """
    namespace = namespace or get_namespace()
    name = name or get_network_config_name()

    body = client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(
            name=name,
            namespace=namespace,
            labels={LABEL_MANAGED_BY: CONTROLLER_NAME},
        ),
        data={},
    )

    try:
        configmap = call_with_rate_limit_retry(
            core_api.create_namespaced_config_map,
            namespace=namespace,
            body=body,
            field_manager=FIELD_MANAGER,
        )
        metrics.api_call_total.labels(api_type="k8s", operation="create_network_config", result="success").inc()
        logger.info(f"Created network config configmap {namespace}/{name}")
        return configmap, True
    except ApiException as e:
        if e.status != 409:
            metrics.api_call_total.labels(api_type="k8s", operation="create_network_config", result="error").inc()
            raise
        metrics.api_call_total.labels(api_type="k8s", operation="create_network_config", result="exists").inc()

    logger.info(f"Network config configmap {namespace}/{name} already exists")
    configmap = get_network_config_configmap(
        make_configmap_getter(core_api), namespace=namespace, name=name, use_cache=False
    )
    return configmap, False


def get_domain_suffix_value(configmap: client.V1ConfigMap) -> str:
    """Trimmed domain suffix from the ConfigMap, empty when unset."""
    return ((configmap.data or {}).get(KEY_DOMAIN_SUFFIX) or "").strip()


def patch_domain_suffix(
    core_api: client.CoreV1Api,
    configmap: client.V1ConfigMap,
    domain_suffix: str,
) -> client.V1ConfigMap:
    """Merge-patch the domain suffix into the network config.

    Args:
        core_api: CoreV1 API client
        configmap: The network config ConfigMap (its namespace and name are patched)
        domain_suffix: Value to store under ``domain-suffix``

    Returns:
        The patched ConfigMap

    Raises:
        DomainSuffixPersistError: If the patch fails, including a 409 when the
            ConfigMap changed after it was read
    """
    namespace = configmap.metadata.namespace
    name = configmap.metadata.name
    body: dict[str, Any] = {"data": {KEY_DOMAIN_SUFFIX: domain_suffix}}
    if configmap.metadata.resource_version:
        # Conflicts with any write made since the ConfigMap was read
        body["metadata"] = {"resourceVersion": configmap.metadata.resource_version}

    start_time = time.time()
    try:
        patched = call_with_rate_limit_retry(
            core_api.patch_namespaced_config_map,
            name=name,
            namespace=namespace,
            body=body,
            field_manager=FIELD_MANAGER,
            _content_type="application/merge-patch+json",
        )
        metrics.api_call_total.labels(api_type="k8s", operation="patch_network_config", result="success").inc()
    except ApiException as e:
        metrics.api_call_total.labels(api_type="k8s", operation="patch_network_config", result="error").inc()
        raise DomainSuffixPersistError(f"failed to patch configmap {name}") from e
    finally:
        duration = time.time() - start_time
        metrics.api_call_duration_seconds.labels(api_type="k8s", operation="patch_network_config").observe(duration)
        invalidate_cache(make_cache_key(KIND_CONFIG_MAP, namespace, name))

    return patched
