"""Utilities for emitting Kubernetes events."""

from __future__ import annotations

from typing import Any

import kopf

from ..constants import (
    EVENT_REASON_BOOTSTRAP_FAILED,
    EVENT_REASON_BOOTSTRAP_STARTED,
    EVENT_REASON_DOMAIN_SUFFIX_GENERATED,
    EVENT_REASON_PROBE_INGRESS_CREATED,
    EVENT_REASON_PROBE_INGRESS_READY,
)


def emit_event(
    body: dict[str, Any],
    reason: str,
    message: str,
    type_: str = "Normal",
) -> None:
    """Emit a Kubernetes event.

    Args:
        body: Body of the involved object (apiVersion, kind and metadata)
        reason: Event reason
        message: Event message
        type_: Event type (Normal or Warning)
    """
    kopf.event(
        body,
        reason=reason,
        message=message,
        type=type_,
    )


def emit_bootstrap_started(body: dict[str, Any]) -> None:
    """Emit bootstrap started event."""
    emit_event(body, EVENT_REASON_BOOTSTRAP_STARTED, "Domain suffix bootstrap started")


def emit_bootstrap_failed(body: dict[str, Any], message: str) -> None:
    """Emit bootstrap failed event."""
    emit_event(body, EVENT_REASON_BOOTSTRAP_FAILED, message, type_="Warning")


def emit_domain_suffix_generated(body: dict[str, Any], domain_suffix: str) -> None:
    """Emit domain suffix generated event."""
    emit_event(body, EVENT_REASON_DOMAIN_SUFFIX_GENERATED, f"Domain suffix generated: {domain_suffix}")


def emit_probe_ingress_created(body: dict[str, Any], ingress_name: str) -> None:
    """Emit probe ingress created event."""
    emit_event(body, EVENT_REASON_PROBE_INGRESS_CREATED, f"Probe ingress {ingress_name} created")


def emit_probe_ingress_ready(body: dict[str, Any], ingress_name: str, ip: str) -> None:
    """Emit probe ingress ready event."""
    emit_event(body, EVENT_REASON_PROBE_INGRESS_READY, f"Probe ingress {ingress_name} resolved to {ip}")
