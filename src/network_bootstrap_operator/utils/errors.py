"""Error types and sanitization utilities."""

from __future__ import annotations

import re


class NetworkBootstrapError(Exception):
    """Base class for domain suffix bootstrap failures."""


class NetworkConfigNotFoundError(NetworkBootstrapError):
    """The network config ConfigMap does not exist."""


class IngressConfigError(NetworkBootstrapError):
    """The ingress settings in the network config are unusable."""


class ProbeIngressError(NetworkBootstrapError):
    """The probe ingress could not be created or read."""


class WaitTimeoutError(NetworkBootstrapError):
    """A poll loop ran out of time before its condition held."""


class IngressWaitTimeoutError(WaitTimeoutError):
    """The probe ingress never received a load-balancer address."""


class IngressAddressError(NetworkBootstrapError):
    """The probe ingress address could not be turned into an IPv4 address."""


class DomainSuffixPersistError(NetworkBootstrapError):
    """The derived domain suffix could not be written to the network config."""


# Patterns that might expose sensitive information
SENSITIVE_PATTERNS = [
    r"(bearer)\s+[A-Za-z0-9\-_\.=]+",
    r"(authorization)[:\s]+[^\s,;\)]+",
    r"(client[_\-\s]?key(?:[_\-\s]?data)?)[:\s]+[^\s,;\)]+",
    r"(password)[:\s]+[^\s,;\)]+",
]

def sanitize_error_message(message: str) -> str:
    """Sanitize error message to remove credentials.

    Args:
        message: Original error message

    Returns:
        Sanitized error message with sensitive data redacted
    """
    sanitized = message
    for pattern in SENSITIVE_PATTERNS:
        sanitized = re.sub(pattern, r"\1 [REDACTED]", sanitized, flags=re.IGNORECASE)
    return sanitized


def sanitize_exception(error: Exception) -> str:
    """Sanitize exception message."""
    return sanitize_error_message(str(error))
