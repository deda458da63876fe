"""Handler modules for operator resources."""

# Import handlers to register them - handlers register themselves via @kopf decorators
from . import network_config  # noqa: F401
