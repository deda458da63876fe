"""Health check and metrics endpoints for the operator."""

from __future__ import annotations

import json
import threading
from typing import Any

from prometheus_client import make_wsgi_app
from werkzeug.serving import make_server
from werkzeug.wrappers import Response

_lock = threading.Lock()
_domain_suffix: str | None = None


def set_domain_suffix(domain_suffix: str | None) -> None:
    """Record the domain suffix reported by /readyz."""
    global _domain_suffix
    with _lock:
        _domain_suffix = domain_suffix


def get_domain_suffix() -> str | None:
    """Get the domain suffix reported by /readyz."""
    with _lock:
        return _domain_suffix


def _json_response(body: dict[str, Any], status: int = 200) -> Response:
    return Response(json.dumps(body, separators=(",", ":")), mimetype="application/json", status=status)


def create_combined_wsgi_app() -> Any:
    """Create a WSGI app that combines metrics and health check endpoints.

    Returns:
        Combined WSGI application
    """
    metrics_app = make_wsgi_app()

    def combined_app(environ: dict[str, Any], start_response: Any) -> Any:
        """WSGI app that routes /healthz and /readyz, delegates /metrics to prometheus."""
        path = environ.get("PATH_INFO", "")

        if path == "/healthz":
            return _json_response({"status": "ok"})(environ, start_response)
        if path == "/readyz":
            body: dict[str, Any] = {"status": "ready"}
            domain_suffix = get_domain_suffix()
            if domain_suffix:
                body["domainSuffix"] = domain_suffix
            return _json_response(body)(environ, start_response)
        if path in ("/metrics", "/metrics/"):
            return metrics_app(environ, start_response)
        return _json_response({"error": "not found"}, status=404)(environ, start_response)

    return combined_app


def start_health_server(port: int) -> threading.Thread:
    """Serve the combined app on ``port`` from a daemon thread.

    Args:
        port: Port number for the metrics/health server

    Returns:
        The serving thread
    """
    server = make_server("", port, create_combined_wsgi_app(), threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    return thread
