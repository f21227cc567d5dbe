from typing import Any

import httpx

from ..base import EndpointError, InferenceEndpoint
from ..models import EndpointReply

DEFAULT_UPSTREAM_URL = "https://chat.onedevai.workers.dev/"


class DirectEndpoint(InferenceEndpoint):
    """Calls the external inference origin directly.

    Hidden design decisions:
    - httpx client initialization and lifetime
    - How the prompt is encoded (``?prompt=`` query parameter)
    - Translation of httpx failures into EndpointError
    """

    def __init__(
        self,
        base_url: str = DEFAULT_UPSTREAM_URL,
        timeout: float | None = None,
        **client_kwargs: Any
    ):
        """Initialize the endpoint.

        Args:
            base_url: External origin (default: https://chat.onedevai.workers.dev/)
            timeout: Seconds before giving up, None waits indefinitely
            **client_kwargs: Additional kwargs for httpx.AsyncClient (e.g. transport)
        """
        self._base_url = base_url
        client_kwargs.setdefault("follow_redirects", True)
        self._client = httpx.AsyncClient(timeout=timeout, **client_kwargs)

    @property
    def name(self) -> str:
        return "direct"

    @property
    def url(self) -> str:
        return self._base_url

    async def fetch(self, prompt: str) -> EndpointReply:
        """Send the prompt as a URL-encoded query parameter."""
        try:
            response = await self._client.get(self.url, params={"prompt": prompt})
        except httpx.HTTPError as e:
            raise EndpointError(f"Request to {self.url} failed: {e}") from e

        return EndpointReply(
            status_code=response.status_code,
            body=response.text,
            content_type=response.headers.get("content-type"),
        )

    async def close(self) -> None:
        await self._client.aclose()
