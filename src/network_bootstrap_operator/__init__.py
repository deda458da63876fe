"""Network Bootstrap Operator: derives and persists the cluster ingress domain suffix."""

__version__ = "0.1.0"
