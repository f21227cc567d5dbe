"""Relay configuration loaded from environment variables."""

import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..endpoint import DEFAULT_UPSTREAM_URL


class RelayMode(str, Enum):
    """Shape of successful relay replies."""

    NORMALIZE = "normalize"  # {"response": "<display string>"}
    PASSTHROUGH = "passthrough"  # upstream body and content type, unchanged


def _parse_timeout(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value)


class RelaySettings(BaseModel):
    """Settings for the relay application."""

    upstream_url: str = Field(
        default=DEFAULT_UPSTREAM_URL,
        description="External inference origin prompts are forwarded to"
    )
    mode: RelayMode = Field(default=RelayMode.NORMALIZE)
    timeout: float | None = Field(
        default=None,
        gt=0,
        description="Upstream timeout in seconds (None waits indefinitely)"
    )
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "RelaySettings":
        """Build settings from the environment (and a .env file if present).

        Environment variables:
            PROMPTCHAT_UPSTREAM_URL: External origin (default: https://chat.onedevai.workers.dev/)
            PROMPTCHAT_RELAY_MODE: normalize or passthrough (default: normalize)
            PROMPTCHAT_TIMEOUT: Upstream timeout in seconds (default: none)
            PROMPTCHAT_LOG_LEVEL: Logging level (default: INFO)
            PROMPTCHAT_CORS_ORIGINS: Comma-separated allowed origins (default: *)
        """
        load_dotenv()
        origins = os.getenv("PROMPTCHAT_CORS_ORIGINS", "*")
        return cls(
            upstream_url=os.getenv("PROMPTCHAT_UPSTREAM_URL", DEFAULT_UPSTREAM_URL),
            mode=RelayMode(os.getenv("PROMPTCHAT_RELAY_MODE", "normalize").lower()),
            timeout=_parse_timeout(os.getenv("PROMPTCHAT_TIMEOUT")),
            log_level=os.getenv("PROMPTCHAT_LOG_LEVEL", "INFO"),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )
