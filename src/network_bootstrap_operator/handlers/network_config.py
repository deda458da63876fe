"""Handler for the network config ConfigMap."""

from __future__ import annotations

from typing import Any

import kopf
from kubernetes.client.exceptions import ApiException

from ..config import get_namespace, get_network_config_name
from ..constants import KEY_DOMAIN_SUFFIX, KIND_CONFIG_MAP
from ..services.domain_suffix import ensure_domain_suffix
from ..services.network_config import make_configmap_getter
from ..utils.context import with_correlation_id
from ..utils.errors import NetworkBootstrapError
from ..utils.events import emit_bootstrap_started
from .base import BaseHandler
from .shared import get_k8s_clients


def is_network_config(name: str, namespace: str, **_: Any) -> bool:
    """Filter for the operator's own network config ConfigMap."""
    return name == get_network_config_name() and namespace == get_namespace()


class NetworkConfigHandler(BaseHandler):
    """Handler for the network config ConfigMap."""

    def __init__(self):
        """Initialize network config handler."""
        super().__init__(KIND_CONFIG_MAP)

    def reconcile(self, body: dict[str, Any], meta: dict[str, Any]) -> str:
        """Make sure the network config carries a domain suffix."""
        with with_correlation_id():
            data = body.get("data") or {}
            if not (data.get(KEY_DOMAIN_SUFFIX) or "").strip():
                self.log_info(
                    meta,
                    "Domain suffix not set, starting bootstrap",
                    event="bootstrap",
                    reason="BootstrapStarted",
                )
                emit_bootstrap_started(body)

            core_api, networking_api = get_k8s_clients()
            try:
                domain_suffix = ensure_domain_suffix(
                    make_configmap_getter(core_api),
                    core_api,
                    networking_api,
                    event_body=body,
                )
            except (NetworkBootstrapError, ApiException) as e:
                self.handle_bootstrap_error(body, meta, e)

            self.log_info(
                meta,
                f"Domain suffix is {domain_suffix}",
                event="bootstrap",
                reason="BootstrapSucceeded",
                domain_suffix=domain_suffix,
            )
            return domain_suffix


# Global handler instance
_handler = NetworkConfigHandler()


@kopf.on.create("v1", "configmaps", when=is_network_config)
@kopf.on.update("v1", "configmaps", when=is_network_config)
@kopf.on.resume("v1", "configmaps", when=is_network_config)
def handle_network_config(
    body: kopf.Body,
    meta: kopf.Meta,
    **kwargs: Any,
) -> None:
    """Handle network config reconciliation."""
    _handler.reconcile(body, meta)
