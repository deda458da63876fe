"""Builders for ingress settings and Ingress objects."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from kubernetes import client

from ..constants import (
    DEFAULT_INGRESS_PATH,
    KEY_INGRESS_ANNOTATIONS,
    KEY_INGRESS_CLASS,
    KEY_INGRESS_PATH,
    KEY_INGRESS_PATH_TYPE,
    LABEL_MANAGED_BY,
    LABEL_PROBE,
    CONTROLLER_NAME,
    PATH_TYPE_IMPLEMENTATION_SPECIFIC,
    PROBE_HOST_SUFFIX,
    PROBE_INGRESS_GENERATE_NAME,
    PROBE_SERVICE_NAME,
    SERVICE_PORT,
)
from ..utils.errors import IngressConfigError


@dataclass
class IngressConfig:
    """Ingress settings read from the network config."""

    class_name: str | None = None
    annotations: dict[str, str] = field(default_factory=dict)
    path: str = DEFAULT_INGRESS_PATH
    path_type: str = PATH_TYPE_IMPLEMENTATION_SPECIFIC


def create_ingress_config_from_data(
    data: dict[str, str] | None,
    configmap_name: str = "network",
) -> IngressConfig:
    """Create an IngressConfig from network config ConfigMap data.

    Blank values fall back to defaults.

    Args:
        data: ConfigMap ``data`` (may be None)
        configmap_name: ConfigMap name, used in error messages

    Returns:
        Parsed ingress settings

    Raises:
        IngressConfigError: If the annotations value is not a JSON object of strings
    """
    data = data or {}

    class_name = (data.get(KEY_INGRESS_CLASS) or "").strip() or None

    annotations: dict[str, Any] = {}
    raw_annotations = (data.get(KEY_INGRESS_ANNOTATIONS) or "").strip()
    if raw_annotations:
        try:
            annotations = json.loads(raw_annotations)
        except json.JSONDecodeError as e:
            raise IngressConfigError(
                f"failed to json unmarshal {KEY_INGRESS_ANNOTATIONS} in configmap "
                f"{configmap_name}: {raw_annotations}"
            ) from e
        if not isinstance(annotations, dict) or not all(
            isinstance(v, str) for v in annotations.values()
        ):
            raise IngressConfigError(
                f"{KEY_INGRESS_ANNOTATIONS} in configmap {configmap_name} must be a JSON "
                f"object of strings: {raw_annotations}"
            )

    path = (data.get(KEY_INGRESS_PATH) or "").strip() or DEFAULT_INGRESS_PATH
    path_type = (data.get(KEY_INGRESS_PATH_TYPE) or "").strip() or PATH_TYPE_IMPLEMENTATION_SPECIFIC

    return IngressConfig(
        class_name=class_name,
        annotations=annotations,
        path=path,
        path_type=path_type,
    )


def build_ingress_rule(
    host: str,
    service_name: str,
    service_port: int = SERVICE_PORT,
    path: str = DEFAULT_INGRESS_PATH,
    path_type: str = PATH_TYPE_IMPLEMENTATION_SPECIFIC,
) -> client.V1IngressRule:
    """Build an ingress rule routing ``host`` to a service port."""
    return client.V1IngressRule(
        host=host,
        http=client.V1HTTPIngressRuleValue(
            paths=[
                client.V1HTTPIngressPath(
                    path=path,
                    path_type=path_type,
                    backend=client.V1IngressBackend(
                        service=client.V1IngressServiceBackend(
                            name=service_name,
                            port=client.V1ServiceBackendPort(number=service_port),
                        ),
                    ),
                )
            ],
        ),
    )


def build_probe_host(pod_name: str) -> str:
    """Host name used by the probe ingress rule."""
    return f"{pod_name}.{PROBE_HOST_SUFFIX}"


def build_probe_ingress(
    ingress_config: IngressConfig,
    namespace: str,
    pod_name: str,
) -> client.V1Ingress:
    """Build the throwaway Ingress used to discover the load-balancer address.

    The probe always routes ``/`` with ``ImplementationSpecific``; the
    configured path and path type are not used.

    Args:
        ingress_config: Ingress settings (class name and annotations are used)
        namespace: Namespace to create the probe in
        pod_name: Operator pod name, used to build a unique host

    Returns:
        Ingress object with ``generate_name`` set
    """
    return client.V1Ingress(
        api_version="networking.k8s.io/v1",
        kind="Ingress",
        metadata=client.V1ObjectMeta(
            generate_name=PROBE_INGRESS_GENERATE_NAME,
            namespace=namespace,
            annotations=dict(ingress_config.annotations) or None,
            labels={
                LABEL_MANAGED_BY: CONTROLLER_NAME,
                LABEL_PROBE: "true",
            },
        ),
        spec=client.V1IngressSpec(
            ingress_class_name=ingress_config.class_name,
            rules=[
                build_ingress_rule(
                    host=build_probe_host(pod_name),
                    service_name=PROBE_SERVICE_NAME,
                    service_port=SERVICE_PORT,
                    path=DEFAULT_INGRESS_PATH,
                    path_type=PATH_TYPE_IMPLEMENTATION_SPECIFIC,
                )
            ],
        ),
    )


def build_hostname(name: str, namespace: str, domain_suffix: str) -> str:
    """Default hostname for a workload: ``<name>-<namespace>.<domain_suffix>``."""
    return f"{name}-{namespace}.{domain_suffix.strip().strip('.')}"
