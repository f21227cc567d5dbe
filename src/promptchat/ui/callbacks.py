"""Store and logging integration for the TUI.

Hides the details of how the TUI receives updates: conversation changes
arrive through a store listener, diagnostic records through a logging
handler. Both use thread-safe calls so records emitted off the UI thread
still land in the widgets.
"""

import logging
import threading
from typing import TYPE_CHECKING, Any

from ..conversation import Message
from .config import LogLevel
from .themes import theme_name

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import (
        ChatHistoryWidget,
        ChatInputBar,
        DebugPanel,
        StatusBar,
        TypingIndicator,
    )


def _call_thread_safe(app: "App | None", func: Any, *args: Any, **kwargs: Any) -> None:
    """Call a function in a thread-safe manner for UI updates."""
    if app is not None and app._thread_id != threading.get_ident():
        app.call_from_thread(func, *args, **kwargs)
    else:
        func(*args, **kwargs)


class TUICallback:
    """Conversation listener that mirrors store changes into the widgets."""

    def __init__(
        self,
        chat: "ChatHistoryWidget",
        typing: "TypingIndicator",
        input_bar: "ChatInputBar",
        status: "StatusBar | None" = None,
        app: "App | None" = None
    ) -> None:
        self.chat = chat
        self.typing = typing
        self.input_bar = input_bar
        self.status = status
        self.app = app

    def message_appended(self, message: Message) -> None:
        _call_thread_safe(self.app, self._show_message, message)

    def in_flight_changed(self, in_flight: bool) -> None:
        _call_thread_safe(self.app, self._show_in_flight, in_flight)

    def theme_changed(self, dark_mode: bool) -> None:
        if self.app is not None:
            _call_thread_safe(self.app, setattr, self.app, "theme", theme_name(dark_mode))

    def _show_message(self, message: Message) -> None:
        self.chat.add_message(message)
        if self.status is not None:
            self.status.update_status(messages=self.chat.message_count)

    def _show_in_flight(self, in_flight: bool) -> None:
        self.typing.display = in_flight
        self.input_bar.set_busy(in_flight)
        if self.status is not None:
            self.status.update_status(waiting=in_flight)
        if in_flight:
            self.chat.scroll_end(animate=False)


class DebugPanelHandler(logging.Handler):
    """Logging handler that writes records to the TUI's DebugPanel.

    Level filtering happens in the panel so the threshold can change at
    runtime without touching logger configuration.
    """

    def __init__(self, panel: "DebugPanel", app: "App | None" = None) -> None:
        super().__init__(level=logging.DEBUG)
        self.panel = panel
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info and record.exc_info[1] is not None:
                message = f"{message} ({record.exc_info[1]!r})"
            component = record.name.rsplit(".", 1)[-1]
            level = LogLevel.from_record_level(record.levelno)
            _call_thread_safe(self.app, self.panel.log, component, message, level)
        except Exception:
            self.handleError(record)
