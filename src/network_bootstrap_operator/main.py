"""Main entry point for the Network Bootstrap Operator.

Run with ``kopf run -m network_bootstrap_operator.main --namespace <operator-namespace>``.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import kopf
from kubernetes.client.exceptions import ApiException

from . import handlers  # noqa: F401
from . import health
from . import logging as structured_logging
from .handlers.shared import get_k8s_clients
from .services.network_config import ensure_network_config_configmap, get_domain_suffix_value
from .tracing import initialize_tracing
from .utils.errors import sanitize_exception

logger = logging.getLogger(__name__)


@kopf.on.startup()
def configure(settings: kopf.OperatorSettings, **_: Any) -> None:
    """Configure the operator."""
    structured_logging.setup_structured_logging()
    initialize_tracing()

    # Keep kopf state in annotations; ConfigMaps have no status subresource
    settings.persistence.progress_storage = kopf.AnnotationsProgressStorage()
    settings.persistence.diffbase_storage = kopf.AnnotationsDiffBaseStorage()

    settings.posting.level = logging.INFO
    settings.networking.request_timeout = 30.0
    settings.execution.max_workers = 2

    # Start metrics HTTP server with health check endpoints
    metrics_port = int(os.getenv("METRICS_PORT", "8080"))
    health.start_health_server(metrics_port)


@kopf.on.startup()
def ensure_network_config(**_: Any) -> None:
    """Create the network config ConfigMap if nobody has yet."""
    core_api, _networking_api = get_k8s_clients()
    try:
        configmap, created = ensure_network_config_configmap(core_api)
    except ApiException as e:
        raise kopf.TemporaryError(
            f"Failed to ensure network config: {sanitize_exception(e)}", delay=10
        ) from e

    domain_suffix = get_domain_suffix_value(configmap)
    if domain_suffix:
        health.set_domain_suffix(domain_suffix)
    logger.info(
        f"Network config {configmap.metadata.namespace}/{configmap.metadata.name} "
        f"{'created' if created else 'found'}"
    )
