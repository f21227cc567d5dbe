"""Tests for the Textual TUI."""
import logging

import pytest
from textual.widgets import TextArea

from promptchat.conversation import ConversationStore, Sender
from promptchat.dispatcher import MessageDispatcher
from promptchat.ui import (
    ChatApp,
    ChatHistoryWidget,
    DebugPanel,
    DebugPanelHandler,
    LogLevel,
    TypingIndicator,
)


class FakePanel:
    """Stands in for DebugPanel, recording log calls."""

    def __init__(self):
        self.entries = []

    def log(self, component, message, level):
        self.entries.append((component, message, level))


def make_app(endpoint, store=None) -> ChatApp:
    store = store or ConversationStore()
    return ChatApp(MessageDispatcher(store, endpoint))


class TestChatApp:
    """Tests driving the app through Textual's pilot."""

    @pytest.mark.asyncio
    async def test_send_renders_user_and_bot_messages(self, direct_endpoint, text_reply):
        app = make_app(direct_endpoint(text_reply("pong")))

        async with app.run_test() as pilot:
            app.query_one("#chat-input", TextArea).text = "ping"
            await pilot.click("#send-btn")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert [(m.sender, m.text) for m in app.store.history] == [
                (Sender.USER, "ping"),
                (Sender.BOT, "pong"),
            ]
            assert app.query_one("#chat-history", ChatHistoryWidget).message_count == 2
            assert app.query_one("#typing-indicator", TypingIndicator).display is False
            assert app.query_one("#chat-input", TextArea).text == ""
            assert app.store.in_flight is False

    @pytest.mark.asyncio
    async def test_blank_input_is_not_sent(self, direct_endpoint, text_reply):
        app = make_app(direct_endpoint(text_reply("pong")))

        async with app.run_test() as pilot:
            app.query_one("#chat-input", TextArea).text = "   "
            await pilot.click("#send-btn")
            await pilot.pause()

            assert app.store.history == ()
            assert app.query_one("#chat-history", ChatHistoryWidget).message_count == 0

    @pytest.mark.asyncio
    async def test_error_reply_is_rendered(self, direct_endpoint, text_reply):
        app = make_app(direct_endpoint(text_reply("down", status_code=500)))

        async with app.run_test() as pilot:
            app.query_one("#chat-input", TextArea).text = "ping"
            await pilot.click("#send-btn")
            await app.workers.wait_for_complete()
            await pilot.pause()

            assert app.store.history[-1].is_error
            assert app.query("#chat-history .error-message")

    @pytest.mark.asyncio
    async def test_toggle_theme(self, direct_endpoint, text_reply):
        app = make_app(direct_endpoint(text_reply("pong")))

        async with app.run_test() as pilot:
            assert app.theme == "catppuccin-latte"

            app.action_toggle_theme()
            await pilot.pause()
            assert app.store.dark_mode is True
            assert app.theme == "catppuccin-mocha"

            app.action_toggle_theme()
            await pilot.pause()
            assert app.theme == "catppuccin-latte"

    @pytest.mark.asyncio
    async def test_starts_in_dark_mode(self, direct_endpoint, text_reply):
        app = make_app(direct_endpoint(text_reply("pong")), ConversationStore(dark_mode=True))

        async with app.run_test():
            assert app.theme == "catppuccin-mocha"

    @pytest.mark.asyncio
    async def test_log_handler_detached_on_exit(self, direct_endpoint, text_reply):
        app = make_app(direct_endpoint(text_reply("pong")))
        package_logger = logging.getLogger("promptchat")

        async with app.run_test():
            assert any(isinstance(h, DebugPanelHandler) for h in package_logger.handlers)

        assert not any(isinstance(h, DebugPanelHandler) for h in package_logger.handlers)
        assert package_logger.propagate is True

    @pytest.mark.asyncio
    async def test_log_records_reach_debug_panel(self, direct_endpoint, text_reply):
        store = ConversationStore()
        app = ChatApp(MessageDispatcher(store, direct_endpoint(text_reply("pong"))), log_level="debug")

        async with app.run_test() as pilot:
            panel = app.query_one("#debug-panel", DebugPanel)
            assert panel.display is True

            logging.getLogger("promptchat.dispatcher").warning("upstream is slow")
            await pilot.pause()

            assert "[dispatcher] upstream is slow" in panel.get_plain_text()


class TestDebugPanelHandler:
    """Tests for routing log records into the panel."""

    def test_records_are_forwarded(self):
        panel = FakePanel()
        logger = logging.getLogger("promptchat.tests.handler")
        handler = DebugPanelHandler(panel)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            logger.info("sent %s", "ping")
            logger.error("boom")
        finally:
            logger.removeHandler(handler)

        assert panel.entries == [
            ("handler", "sent ping", LogLevel.INFO),
            ("handler", "boom", LogLevel.ERROR),
        ]


class TestLogLevel:
    """Tests for LogLevel helpers."""

    @pytest.mark.parametrize("levelno,expected", [
        (logging.DEBUG, LogLevel.DEBUG),
        (5, LogLevel.DEBUG),
        (logging.INFO, LogLevel.INFO),
        (logging.WARNING, LogLevel.WARNING),
        (logging.CRITICAL, LogLevel.ERROR),
    ])
    def test_from_record_level(self, levelno, expected):
        assert LogLevel.from_record_level(levelno) == expected

    def test_from_string(self):
        assert LogLevel.from_string("WARNING") == LogLevel.WARNING
        assert LogLevel.from_string("nonsense") == LogLevel.DEBUG
