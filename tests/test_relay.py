"""Tests for the relay application."""
import httpx
import pytest
from fastapi.testclient import TestClient

from promptchat import __version__
from promptchat.endpoint import DirectEndpoint
from promptchat.relay import RelayMode, RelaySettings, create_application


def make_client(handler, mode: RelayMode = RelayMode.NORMALIZE) -> TestClient:
    upstream = DirectEndpoint(
        base_url="https://upstream.test/",
        transport=httpx.MockTransport(handler),
    )
    app = create_application(RelaySettings(mode=mode), upstream=upstream)
    return TestClient(app)


def reply_with(status_code: int = 200, **kwargs):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(status_code, **kwargs)

    handler.seen = seen
    return handler


class TestChatRoute:
    """Tests for GET /api/chat."""

    @pytest.mark.parametrize("query", ["", "?prompt=", "?prompt=%20%20"])
    def test_missing_prompt(self, query):
        handler = reply_with(text="unused")
        with make_client(handler) as client:
            response = client.get(f"/api/chat{query}")

        assert response.status_code == 400
        assert response.json() == {"error": "Prompt is required"}
        assert handler.seen == []

    def test_plain_text_upstream_is_wrapped(self):
        handler = reply_with(text="pong")
        with make_client(handler) as client:
            response = client.get("/api/chat", params={"prompt": "ping & more"})

        assert response.status_code == 200
        assert response.json() == {"response": "pong"}
        assert handler.seen[0].url.params["prompt"] == "ping & more"

    def test_nested_upstream_is_normalized(self):
        data = [{"response": {"response": "a"}}, {"response": {"response": "b"}}]
        with make_client(reply_with(json=data)) as client:
            response = client.get("/api/chat?prompt=hi")

        assert response.json() == {"response": "a b"}

    def test_empty_upstream_uses_fallback(self):
        with make_client(reply_with(text="")) as client:
            response = client.get("/api/chat?prompt=hi")

        assert response.json() == {"response": "No response received."}

    def test_passthrough_mode(self):
        data = {"response": {"response": "hi"}}
        with make_client(reply_with(json=data), mode=RelayMode.PASSTHROUGH) as client:
            response = client.get("/api/chat?prompt=hi")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == data

    def test_upstream_error_status_is_forwarded(self):
        with make_client(reply_with(status_code=503, text="busy")) as client:
            response = client.get("/api/chat?prompt=hi")

        assert response.status_code == 503
        assert response.json() == {"error": "Upstream returned 503"}

    def test_upstream_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("no route to host", request=request)

        with make_client(handler) as client:
            response = client.get("/api/chat?prompt=hi")

        assert response.status_code == 500
        assert response.json() == {"error": "Unable to fetch response from API."}

    def test_unrecognized_upstream_shape(self):
        with make_client(reply_with(json={"unexpected": 1})) as client:
            response = client.get("/api/chat?prompt=hi")

        assert response.status_code == 502
        assert response.json() == {"error": "Unrecognized response from API."}


class TestHealthRoute:
    """Tests for GET /health."""

    def test_health(self):
        with make_client(reply_with(text="unused")) as client:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


class TestRelaySettings:
    """Tests for RelaySettings."""

    def test_defaults(self):
        settings = RelaySettings()

        assert settings.upstream_url == "https://chat.onedevai.workers.dev/"
        assert settings.mode == RelayMode.NORMALIZE
        assert settings.timeout is None
        assert settings.cors_origins == ["*"]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PROMPTCHAT_UPSTREAM_URL", "https://example.test/")
        monkeypatch.setenv("PROMPTCHAT_RELAY_MODE", "PASSTHROUGH")
        monkeypatch.setenv("PROMPTCHAT_TIMEOUT", "12.5")
        monkeypatch.setenv("PROMPTCHAT_CORS_ORIGINS", "http://a.test, http://b.test")

        settings = RelaySettings.from_env()

        assert settings.upstream_url == "https://example.test/"
        assert settings.mode == RelayMode.PASSTHROUGH
        assert settings.timeout == 12.5
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_invalid_mode(self, monkeypatch):
        monkeypatch.setenv("PROMPTCHAT_RELAY_MODE", "reshape")
        with pytest.raises(ValueError):
            RelaySettings.from_env()

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValueError):
            RelaySettings(timeout=0)
