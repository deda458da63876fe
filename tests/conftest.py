"""Shared fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from kubernetes import client

from network_bootstrap_operator import health
from network_bootstrap_operator.utils.cache import invalidate_cache


@pytest.fixture(autouse=True)
def isolate_module_state(monkeypatch):
    """Clear caches, disable rate limit sleeps and pin the operator namespace."""
    invalidate_cache()
    health.set_domain_suffix(None)
    monkeypatch.setattr("network_bootstrap_operator.utils.rate_limit._K8S_RATE_LIMIT_PER_SECOND", 1_000_000.0)
    monkeypatch.setenv("OPERATOR_NAMESPACE", "ops")
    monkeypatch.delenv("NETWORK_CONFIG_NAME", raising=False)
    monkeypatch.delenv("MAGIC_DNS", raising=False)
    monkeypatch.delenv("POD_NAME", raising=False)
    yield
    invalidate_cache()


@pytest.fixture(autouse=True)
def mock_kopf_event():
    """Kopf can only post events inside a running operator."""
    with patch("network_bootstrap_operator.utils.events.kopf.event") as mock_event:
        yield mock_event


def make_configmap(
    data: dict[str, str] | None = None,
    name: str = "network",
    namespace: str = "ops",
    resource_version: str | None = None,
) -> client.V1ConfigMap:
    """Build a network config ConfigMap model."""
    return client.V1ConfigMap(
        api_version="v1",
        kind="ConfigMap",
        metadata=client.V1ObjectMeta(
            name=name, namespace=namespace, uid="uid-1", resource_version=resource_version
        ),
        data=data,
    )


def make_ingress(
    name: str = "default-domain-x7k2p",
    namespace: str = "ops",
    ip: str | None = None,
    hostname: str | None = None,
) -> client.V1Ingress:
    """Build an Ingress model, with a load-balancer entry when ip or hostname is given."""
    load_balancer_ingress = []
    if ip is not None or hostname is not None:
        load_balancer_ingress.append(client.V1IngressLoadBalancerIngress(ip=ip, hostname=hostname))
    return client.V1Ingress(
        metadata=client.V1ObjectMeta(name=name, namespace=namespace),
        status=client.V1IngressStatus(
            load_balancer=client.V1IngressLoadBalancerStatus(ingress=load_balancer_ingress or None),
        ),
    )


@pytest.fixture
def configmap_factory():
    """Factory for network config ConfigMaps."""
    return make_configmap


@pytest.fixture
def ingress_factory():
    """Factory for Ingress objects."""
    return make_ingress
