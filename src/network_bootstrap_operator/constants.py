"""Constants for the Network Bootstrap Operator."""

# Label/annotation domain
OPERATOR_DOMAIN = "network-bootstrap.dev"

# Resource Kinds
KIND_CONFIG_MAP = "ConfigMap"
KIND_INGRESS = "Ingress"

# Labels
LABEL_MANAGED_BY = f"{OPERATOR_DOMAIN}/managed-by"
LABEL_PROBE = f"{OPERATOR_DOMAIN}/domain-probe"

# Field Manager
FIELD_MANAGER = "network-bootstrap-operator"
CONTROLLER_NAME = "network-bootstrap-operator"

# Network config ConfigMap
DEFAULT_NETWORK_CONFIG_NAME = "network"
KEY_INGRESS_CLASS = "ingress-class"
KEY_INGRESS_ANNOTATIONS = "ingress-annotations"
KEY_INGRESS_PATH = "ingress-path"
KEY_INGRESS_PATH_TYPE = "ingress-path-type"
KEY_DOMAIN_SUFFIX = "domain-suffix"

# Ingress defaults
DEFAULT_INGRESS_PATH = "/"
PATH_TYPE_IMPLEMENTATION_SPECIFIC = "ImplementationSpecific"

# Probe ingress
PROBE_INGRESS_GENERATE_NAME = "default-domain-"
PROBE_HOST_SUFFIX = "this-is-yatai-in-order-to-generate-the-default-domain-suffix.yeah"
PROBE_SERVICE_NAME = "default-domain-service"
SERVICE_PORT = 3000

# Magic DNS
DEFAULT_MAGIC_DNS = "sslip.io"

# Polling (seconds)
DEFAULT_POLL_INTERVAL = 10.0
DEFAULT_WAIT_TIMEOUT = 20 * 60.0

# Namespace detection
SERVICE_ACCOUNT_NAMESPACE_PATH = "/var/run/secrets/kubernetes.io/serviceaccount/namespace"
DEFAULT_NAMESPACE = "default"

# Event Reasons
EVENT_REASON_BOOTSTRAP_STARTED = "DomainSuffixBootstrapStarted"
EVENT_REASON_BOOTSTRAP_FAILED = "DomainSuffixBootstrapFailed"
EVENT_REASON_DOMAIN_SUFFIX_GENERATED = "DomainSuffixGenerated"
EVENT_REASON_PROBE_INGRESS_CREATED = "ProbeIngressCreated"
EVENT_REASON_PROBE_INGRESS_READY = "ProbeIngressReady"
