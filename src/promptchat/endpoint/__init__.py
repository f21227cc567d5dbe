from .base import EndpointError, InferenceEndpoint, ensure_success
from .factory import create_endpoint
from .models import EndpointReply
from .providers import DEFAULT_RELAY_URL, DEFAULT_UPSTREAM_URL, DirectEndpoint, RelayEndpoint

__all__ = [
    "DEFAULT_RELAY_URL",
    "DEFAULT_UPSTREAM_URL",
    "DirectEndpoint",
    "EndpointError",
    "EndpointReply",
    "InferenceEndpoint",
    "RelayEndpoint",
    "create_endpoint",
    "ensure_success",
]
