"""Main Textual TUI application.

Orchestrates the UI components and hands prompts to the MessageDispatcher.
The conversation itself lives in the ConversationStore; widgets only mirror it.
"""

import logging

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..conversation import ConversationStore
from ..dispatcher import MessageDispatcher
from ..endpoint import InferenceEndpoint
from .callbacks import DebugPanelHandler, TUICallback
from .config import APP_TITLE, LogLevel
from .styles import APP_CSS
from .themes import CATPPUCCIN_LATTE, CATPPUCCIN_MOCHA, theme_name
from .widgets import (
    ChatHistoryWidget,
    ChatInputBar,
    DebugPanel,
    StatusBar,
    TypingIndicator,
)

logger = logging.getLogger(__name__)

# Logger whose records are mirrored into the debug panel
PACKAGE_LOGGER = "promptchat"


class ChatApp(App):
    """Textual TUI for chatting with a text-generation endpoint."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+t", "toggle_theme", "Theme"),
        Binding("ctrl+r", "copy_last_response", "Copy Reply"),
        Binding("ctrl+d", "toggle_debug", "Log"),
    ]

    def __init__(
        self,
        dispatcher: MessageDispatcher,
        log_level: str | None = None,
    ) -> None:
        super().__init__()
        self._dispatcher = dispatcher
        self._log_level = log_level
        self._log_handler: DebugPanelHandler | None = None

    @property
    def store(self) -> ConversationStore:
        return self._dispatcher.store

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield TypingIndicator(id="typing-indicator")
        yield DebugPanel(id="debug-panel")

        with Vertical(id="bottom-bar"):
            endpoint = self._dispatcher.endpoint
            yield StatusBar(f"{endpoint.name} ({endpoint.url})", id="status-bar")
            yield ChatInputBar(id="chat-input-bar")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(CATPPUCCIN_LATTE)
        self.register_theme(CATPPUCCIN_MOCHA)
        self.theme = theme_name(self.store.dark_mode)

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()

        self._log_handler = DebugPanelHandler(log_panel, app=self)
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.addHandler(self._log_handler)
        package_logger.setLevel(logging.DEBUG)
        # stderr output would corrupt the terminal while Textual owns it
        package_logger.propagate = False

        self.store.subscribe(
            TUICallback(
                chat=self.query_one("#chat-history", ChatHistoryWidget),
                typing=self.query_one("#typing-indicator", TypingIndicator),
                input_bar=self.query_one("#chat-input-bar", ChatInputBar),
                status=self.query_one("#status-bar", StatusBar),
                app=self,
            )
        )

        endpoint = self._dispatcher.endpoint
        self.sub_title = f"{endpoint.name} endpoint"
        logger.info("TUI started (endpoint=%s)", endpoint.url)
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def on_unmount(self) -> None:
        """Detach the log handler so records stop targeting dead widgets."""
        if self._log_handler is not None:
            package_logger = logging.getLogger(PACKAGE_LOGGER)
            package_logger.removeHandler(self._log_handler)
            package_logger.propagate = True
            self._log_handler = None

    def on_chat_input_bar_draft_changed(self, event: ChatInputBar.DraftChanged) -> None:
        self.store.update_draft(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        input_bar = self.query_one("#chat-input-bar", ChatInputBar)

        text = self._dispatcher.begin(event.value)
        if text is None:
            if self.store.in_flight:
                self.notify("Still waiting for the previous reply", severity="warning", timeout=2)
            return

        input_bar.accept(text)
        self._await_reply(text)

    @work(group="dispatch")
    async def _await_reply(self, text: str) -> None:
        """Wait for the reply as a background async worker."""
        message = await self._dispatcher.complete(text)
        if message.is_error:
            self.notify("Unable to fetch response", severity="error", timeout=3)

    def action_toggle_theme(self) -> None:
        """Switch between light and dark mode."""
        dark_mode = self.store.toggle_theme()
        self.notify("Dark mode" if dark_mode else "Light mode", timeout=2)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last bot reply to clipboard."""
        message = self.store.last_bot_message()
        if message:
            self.copy_to_clipboard(message.text)
            self.notify("Reply copied")
        else:
            self.notify("No reply to copy", severity="warning")


async def run_textual_tui(
    endpoint: InferenceEndpoint,
    log_level: str | None = None,
    dark_mode: bool = False,
) -> None:
    """Run the Textual TUI.

    Args:
        endpoint: Endpoint prompts are sent to
        log_level: Log level for panel (debug/info/warning/error), None to hide
        dark_mode: Start in dark mode
    """
    store = ConversationStore(dark_mode=dark_mode)
    app = ChatApp(MessageDispatcher(store, endpoint), log_level=log_level)
    try:
        await app.run_async()
    finally:
        await endpoint.close()
