"""Shared utilities for handlers."""

from __future__ import annotations

from kubernetes import client, config


def load_k8s_config() -> None:
    """Load in-cluster config, falling back to the local kubeconfig."""
    try:
        config.load_incluster_config()
    except config.ConfigException:
        config.load_kube_config()


def get_k8s_clients() -> tuple[client.CoreV1Api, client.NetworkingV1Api]:
    """Get the CoreV1 and NetworkingV1 API clients.

    Returns:
        Tuple of (CoreV1Api, NetworkingV1Api)
    """
    load_k8s_config()
    return client.CoreV1Api(), client.NetworkingV1Api()
