from typing import Any

from .direct import DirectEndpoint

DEFAULT_RELAY_URL = "http://localhost:8000"
RELAY_PATH = "/api/chat"


class RelayEndpoint(DirectEndpoint):
    """Calls the same-origin relay (``GET /api/chat``) instead of the external origin.

    The relay hides the external origin from the client and may reshape the
    reply server-side; from the client's point of view only the URL differs.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_RELAY_URL,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        super().__init__(base_url=base_url, timeout=timeout, **client_kwargs)
        self._relay_url = base_url.rstrip("/") + RELAY_PATH

    @property
    def name(self) -> str:
        return "relay"

    @property
    def url(self) -> str:
        return self._relay_url
