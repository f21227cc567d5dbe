from .direct import DEFAULT_UPSTREAM_URL, DirectEndpoint
from .relay import DEFAULT_RELAY_URL, RelayEndpoint

__all__ = ["DEFAULT_RELAY_URL", "DEFAULT_UPSTREAM_URL", "DirectEndpoint", "RelayEndpoint"]
