"""Pytest configuration and shared fixtures."""
import os
from collections.abc import Callable

import httpx
import pytest

from promptchat.conversation import ConversationStore
from promptchat.endpoint import DirectEndpoint, RelayEndpoint

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture(scope="session")
def upstream_url():
    """Return the external origin used by integration tests."""
    return os.getenv("PROMPTCHAT_UPSTREAM_URL", "https://chat.onedevai.workers.dev/")


@pytest.fixture
def store():
    """Return an empty conversation store."""
    return ConversationStore()


@pytest.fixture
def direct_endpoint():
    """Return a factory building a DirectEndpoint backed by a mock transport."""
    def _make(handler: Handler, **kwargs) -> DirectEndpoint:
        return DirectEndpoint(
            base_url="https://upstream.test/",
            transport=httpx.MockTransport(handler),
            **kwargs
        )
    return _make


@pytest.fixture
def relay_endpoint():
    """Return a factory building a RelayEndpoint backed by a mock transport."""
    def _make(handler: Handler, **kwargs) -> RelayEndpoint:
        return RelayEndpoint(
            base_url="http://relay.test",
            transport=httpx.MockTransport(handler),
            **kwargs
        )
    return _make


def _text_reply(text: str, status_code: int = 200) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)
    return _handler


def _json_reply(data, status_code: int = 200) -> Handler:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=data)
    return _handler


@pytest.fixture
def text_reply():
    """Return a factory for handlers answering with a plain-text body."""
    return _text_reply


@pytest.fixture
def json_reply():
    """Return a factory for handlers answering with a JSON body."""
    return _json_reply
