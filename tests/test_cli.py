"""Tests for the command-line interface."""
import httpx
import pytest
from typer.testing import CliRunner

from promptchat.cli import app as cli_app
from promptchat.endpoint import DirectEndpoint, RelayEndpoint

runner = CliRunner()


@pytest.fixture
def use_endpoint(monkeypatch):
    """Route CLI commands to a mock-transport endpoint."""
    def _use(handler):
        def _get_endpoint(kind=None, console=None):
            return DirectEndpoint(
                base_url="https://upstream.test/",
                transport=httpx.MockTransport(handler),
            )
        monkeypatch.setattr(cli_app, "get_endpoint", _get_endpoint)
    return _use


class TestAskCommand:
    """Tests for `promptchat ask`."""

    def test_prints_reply(self, use_endpoint, text_reply):
        use_endpoint(text_reply("pong"))

        result = runner.invoke(cli_app.app, ["ask", "ping"])

        assert result.exit_code == 0
        assert "pong" in result.stdout

    def test_error_reply_exits_nonzero(self, use_endpoint, text_reply):
        use_endpoint(text_reply("down", status_code=500))

        result = runner.invoke(cli_app.app, ["ask", "ping"])

        assert result.exit_code == 1
        assert "Error: Unable to fetch response." in result.stdout

    def test_blank_prompt_exits_nonzero(self, use_endpoint, text_reply):
        use_endpoint(text_reply("pong"))

        result = runner.invoke(cli_app.app, ["ask", "   "])

        assert result.exit_code == 1


class TestHealthCommand:
    """Tests for `promptchat health`."""

    def test_reachable(self, use_endpoint, text_reply):
        use_endpoint(text_reply("pong"))

        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 0
        assert "OK" in result.stdout

    def test_unreachable(self, use_endpoint):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        use_endpoint(handler)

        result = runner.invoke(cli_app.app, ["health"])

        assert result.exit_code == 1
        assert "FAILED" in result.stdout


class TestGetEndpoint:
    """Tests for environment-driven endpoint selection."""

    def test_defaults_to_direct(self, monkeypatch):
        from promptchat.cli.providers import get_endpoint

        monkeypatch.delenv("PROMPTCHAT_ENDPOINT", raising=False)
        monkeypatch.delenv("PROMPTCHAT_UPSTREAM_URL", raising=False)

        endpoint = get_endpoint()

        assert isinstance(endpoint, DirectEndpoint)
        assert endpoint.url == "https://chat.onedevai.workers.dev/"

    def test_relay_from_env(self, monkeypatch):
        from promptchat.cli.providers import get_endpoint

        monkeypatch.setenv("PROMPTCHAT_ENDPOINT", "relay")
        monkeypatch.setenv("PROMPTCHAT_RELAY_URL", "http://relay.test:9000")

        endpoint = get_endpoint()

        assert isinstance(endpoint, RelayEndpoint)
        assert endpoint.url == "http://relay.test:9000/api/chat"

    def test_unknown_kind_exits(self):
        import typer

        from promptchat.cli.providers import get_endpoint

        with pytest.raises(typer.Exit):
            get_endpoint("websocket")

    def test_invalid_timeout_exits(self, monkeypatch):
        import typer

        from promptchat.cli.providers import get_endpoint

        monkeypatch.setenv("PROMPTCHAT_TIMEOUT", "soon")
        with pytest.raises(typer.Exit):
            get_endpoint("direct")

    @pytest.mark.parametrize("value", ["0", "-5", "nan"])
    def test_non_positive_timeout_exits(self, monkeypatch, value):
        import typer

        from promptchat.cli.providers import get_endpoint

        monkeypatch.setenv("PROMPTCHAT_TIMEOUT", value)
        with pytest.raises(typer.Exit):
            get_endpoint("direct")

    def test_get_timeout_reads_positive_seconds(self, monkeypatch):
        from promptchat.cli.providers import get_timeout

        monkeypatch.setenv("PROMPTCHAT_TIMEOUT", "2.5")
        assert get_timeout() == 2.5
