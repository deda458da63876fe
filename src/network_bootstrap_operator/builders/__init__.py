"""Builders for creating Kubernetes objects from network config."""

from .ingress import (
    IngressConfig,
    build_hostname,
    build_ingress_rule,
    build_probe_ingress,
    create_ingress_config_from_data,
)

__all__ = [
    "IngressConfig",
    "build_hostname",
    "build_ingress_rule",
    "build_probe_ingress",
    "create_ingress_config_from_data",
]
