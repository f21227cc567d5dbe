"""Relay routes.

``GET /api/chat`` forwards the prompt to the external origin and reshapes
the reply; ``GET /health`` is a liveness probe.
"""

import logging

from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import JSONResponse

from .. import __version__
from ..dispatcher import ResponseShapeError, normalize_reply
from ..endpoint import EndpointError, InferenceEndpoint
from .settings import RelayMode, RelaySettings

logger = logging.getLogger(__name__)

router = APIRouter()


def get_upstream(request: Request) -> InferenceEndpoint:
    return request.app.state.upstream


def get_settings(request: Request) -> RelaySettings:
    return request.app.state.settings


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/api/chat", tags=["chat"])
async def chat(request: Request, prompt: str | None = Query(default=None)) -> Response:
    """
    Forward a prompt to the external inference endpoint.

    Responses:
      200 {"response": "..."}          normalize mode
      200 <upstream body>              passthrough mode
      400 {"error": "Prompt is required"}
      4xx/5xx {"error": "..."}         upstream failure
    """
    if not prompt or not prompt.strip():
        return _error(status.HTTP_400_BAD_REQUEST, "Prompt is required")

    upstream = get_upstream(request)
    settings = get_settings(request)

    try:
        reply = await upstream.fetch(prompt)
    except EndpointError as e:
        logger.error("Upstream request failed: %s", e)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Unable to fetch response from API.")

    if not reply.ok:
        logger.warning("Upstream returned HTTP %d", reply.status_code)
        status_code = reply.status_code if reply.status_code >= 400 else status.HTTP_502_BAD_GATEWAY
        return _error(status_code, f"Upstream returned {reply.status_code}")

    if settings.mode == RelayMode.PASSTHROUGH:
        return Response(
            content=reply.body,
            media_type=reply.content_type or "text/plain",
        )

    try:
        text = normalize_reply(reply.body, reply.content_type)
    except ResponseShapeError as e:
        logger.error("Unrecognized upstream reply: %s", e)
        return _error(status.HTTP_502_BAD_GATEWAY, "Unrecognized response from API.")

    return JSONResponse(content={"response": text})


@router.get("/health", tags=["health"])
async def health() -> dict:
    """Liveness probe."""
    return {"status": "ok", "version": __version__}
