from typing import Any

from .base import InferenceEndpoint
from .providers import DirectEndpoint, RelayEndpoint


def create_endpoint(kind: str, **config: Any) -> InferenceEndpoint:
    """Create an inference endpoint client.

    This factory function hides the instantiation logic for different endpoints.

    Args:
        kind: Endpoint type ('direct' or 'relay')
        **config: Endpoint-specific configuration
            For direct:
                - base_url: str (default: 'https://chat.onedevai.workers.dev/')
                - timeout: float | None (default: None, no timeout)
            For relay:
                - base_url: str (required, e.g. 'http://localhost:8000')
                - timeout: float | None (default: None, no timeout)
            Any other keyword is passed to httpx.AsyncClient.

    Returns:
        Initialized endpoint instance

    Raises:
        ValueError: If endpoint type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> endpoint = create_endpoint("direct")

        >>> endpoint = create_endpoint("relay", base_url="http://localhost:8000")
    """
    kind_lower = kind.lower()

    if kind_lower == "direct":
        return DirectEndpoint(**config)

    if kind_lower == "relay":
        if not config.get("base_url"):
            raise TypeError("Relay endpoint requires 'base_url' in config")
        return RelayEndpoint(**config)

    raise ValueError(
        f"Unsupported endpoint: {kind}. "
        f"Supported endpoints: 'direct', 'relay'"
    )
