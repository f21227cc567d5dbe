"""Provider factory functions for CLI.

Centralizes creation of endpoint clients from environment variables.
Hides configuration details from command implementations.
"""

import os

from rich.console import Console

from ..endpoint import (
    DEFAULT_RELAY_URL,
    DEFAULT_UPSTREAM_URL,
    InferenceEndpoint,
    create_endpoint,
)

# Default console for output
_console = Console()

ENDPOINT_KINDS = ("direct", "relay")


def get_timeout() -> float | None:
    """Outbound timeout in seconds from PROMPTCHAT_TIMEOUT, None when unset.

    Raises:
        ValueError: If the value is not a positive number
    """
    value = os.getenv("PROMPTCHAT_TIMEOUT")
    if not value or not value.strip():
        return None
    timeout = float(value)
    if not timeout > 0:
        raise ValueError(f"PROMPTCHAT_TIMEOUT must be positive, got {value!r}")
    return timeout


def get_endpoint(kind: str | None = None, console: Console | None = None) -> InferenceEndpoint:
    """Create the endpoint client from environment variables.

    Args:
        kind: 'direct' or 'relay' (default: PROMPTCHAT_ENDPOINT or 'direct')
        console: Optional Rich console for output

    Returns:
        Endpoint instance

    Raises:
        SystemExit: If the endpoint kind or timeout is invalid

    Environment variables:
        PROMPTCHAT_ENDPOINT: direct or relay (default: direct)
        PROMPTCHAT_UPSTREAM_URL: External origin (default: https://chat.onedevai.workers.dev/)
        PROMPTCHAT_RELAY_URL: Relay base URL (default: http://localhost:8000)
        PROMPTCHAT_TIMEOUT: Timeout in seconds (default: none)
    """
    import typer

    con = console or _console
    kind = (kind or os.getenv("PROMPTCHAT_ENDPOINT", "direct")).lower()

    if kind not in ENDPOINT_KINDS:
        con.print(f"[red]Error: Unknown endpoint: {kind} (expected direct or relay)[/red]")
        raise typer.Exit(code=1)

    try:
        timeout = get_timeout()
    except ValueError:
        con.print("[red]Error: PROMPTCHAT_TIMEOUT must be a positive number of seconds[/red]")
        raise typer.Exit(code=1)

    if kind == "relay":
        base_url = os.getenv("PROMPTCHAT_RELAY_URL", DEFAULT_RELAY_URL)
    else:
        base_url = os.getenv("PROMPTCHAT_UPSTREAM_URL", DEFAULT_UPSTREAM_URL)

    return create_endpoint(kind, base_url=base_url, timeout=timeout)
