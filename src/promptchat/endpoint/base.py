from abc import ABC, abstractmethod
from typing import Any

from .models import EndpointReply


class EndpointError(Exception):
    """Raised when an endpoint cannot be reached or answers with a failure status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InferenceEndpoint(ABC):
    """Abstract base class for text-generation endpoints.

    This module hides the design decision of where prompts are sent.
    Implementations must handle:
    - HTTP client setup
    - URL construction and query encoding
    - Mapping network failures to EndpointError

    Supports async context manager protocol for proper resource cleanup:
        async with endpoint:
            reply = await endpoint.fetch("hello")
        # Automatically cleaned up
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier of the endpoint kind ('direct', 'relay')."""

    @property
    @abstractmethod
    def url(self) -> str:
        """URL the prompt is sent to."""

    @abstractmethod
    async def fetch(self, prompt: str) -> EndpointReply:
        """Send a prompt and return the raw reply.

        Non-success statuses are returned, not raised; use
        ``ensure_success`` to turn them into errors.

        Args:
            prompt: Text typed by the user

        Returns:
            EndpointReply with status, body and content type

        Raises:
            EndpointError: If the endpoint could not be reached
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    async def __aenter__(self) -> "InferenceEndpoint":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise


def ensure_success(reply: EndpointReply) -> EndpointReply:
    """Return the reply unchanged, or raise EndpointError for non-2xx statuses."""
    if not reply.ok:
        raise EndpointError(
            f"Endpoint returned HTTP {reply.status_code}",
            status_code=reply.status_code,
        )
    return reply
