"""Base handler class with common functionality for resource handlers."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import kopf

from ..config import get_retry_delay
from ..constants import CONTROLLER_NAME
from ..logging import log_resource_event
from ..utils.errors import sanitize_exception
from ..utils.events import emit_bootstrap_failed


class BaseHandler:
    """Base class for handlers with structured logging and error handling."""

    def __init__(self, kind: str):
        """Initialize base handler.

        Args:
            kind: The Kubernetes resource kind (e.g., "ConfigMap")
        """
        self.kind = kind
        self.logger = logging.getLogger(__name__)

    def _get_resource_context(self, meta: dict[str, Any]) -> dict[str, Any]:
        return {
            "name": meta.get("name", "unknown"),
            "namespace": meta.get("namespace", "default"),
            "uid": meta.get("uid", "unknown"),
        }

    def _log(
        self,
        level: int,
        meta: dict[str, Any],
        message: str,
        event: str,
        reason: str,
        **kwargs: Any,
    ) -> None:
        ctx = self._get_resource_context(meta)
        log_resource_event(
            self.logger,
            controller=CONTROLLER_NAME,
            resource_kind=self.kind,
            resource_name=ctx["name"],
            namespace=ctx["namespace"],
            uid=ctx["uid"],
            event=event,
            reason=reason,
            message=message,
            level=level,
            **kwargs,
        )

    def log_info(
        self,
        meta: dict[str, Any],
        message: str,
        event: str = "info",
        reason: str = "Info",
        **kwargs: Any,
    ) -> None:
        """Log an info-level structured log message."""
        self._log(logging.INFO, meta, message, event, reason, **kwargs)

    def log_warning(
        self,
        meta: dict[str, Any],
        message: str,
        event: str = "warning",
        reason: str = "Warning",
        **kwargs: Any,
    ) -> None:
        """Log a warning-level structured log message."""
        self._log(logging.WARNING, meta, message, event, reason, **kwargs)

    def log_error(
        self,
        meta: dict[str, Any],
        message: str,
        error: Exception | None = None,
        event: str = "error",
        reason: str = "Error",
        **kwargs: Any,
    ) -> None:
        """Log an error-level structured log message.

        Args:
            meta: Kubernetes resource metadata
            message: Log message
            error: Optional exception to include sanitized error details
            event: Event type (default: "error")
            reason: Reason for the event (default: "Error")
            **kwargs: Additional fields to include in the log
        """
        log_data = kwargs.copy()
        if error is not None:
            log_data["error"] = sanitize_exception(error)
            log_data["error_type"] = type(error).__name__
        self._log(logging.ERROR, meta, message, event, reason, **log_data)

    def handle_bootstrap_error(
        self,
        body: dict[str, Any],
        meta: dict[str, Any],
        error: Exception,
    ) -> NoReturn:
        """Report a failed bootstrap and ask kopf to retry later.

        Raises:
            kopf.TemporaryError: Always raises to trigger retry
        """
        sanitized_error = sanitize_exception(error)
        error_msg = f"Domain suffix bootstrap failed: {sanitized_error}"
        self.log_error(meta, error_msg, error=error, reason="BootstrapFailed")
        emit_bootstrap_failed(body, error_msg)
        raise kopf.TemporaryError(error_msg, delay=get_retry_delay()) from error
