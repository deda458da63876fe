"""Cluster-facing services of the Network Bootstrap Operator."""

from .domain_suffix import build_domain_suffix, ensure_domain_suffix, get_domain_suffix
from .ingress import get_ingress_config, get_ingress_ip
from .network_config import (
    ensure_network_config_configmap,
    get_network_config_configmap,
    make_configmap_getter,
    patch_domain_suffix,
)

__all__ = [
    "build_domain_suffix",
    "ensure_domain_suffix",
    "get_domain_suffix",
    "get_ingress_config",
    "get_ingress_ip",
    "ensure_network_config_configmap",
    "get_network_config_configmap",
    "make_configmap_getter",
    "patch_domain_suffix",
]
