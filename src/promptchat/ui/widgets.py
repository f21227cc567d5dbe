"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Input history management
- Status line formatting
- Log rendering and level filtering
- Chat message rendering
"""

from datetime import datetime

from rich.text import Text
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Markdown, RichLog, Static, TextArea

from ..conversation import Message, Sender
from .config import (
    BOT_AVATAR,
    INPUT_HISTORY_MAX_SIZE,
    LOG_MAX_MESSAGE_LENGTH,
    LOG_TIMESTAMP_FORMAT,
    TYPING_TEXT,
    USER_AVATAR,
    LogLevel,
)


class ChatInputBar(Horizontal):
    """Chat input bar with TextArea and Send button.

    Up/Down at the start/end of the text walks through previously sent prompts.
    """

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class DraftChanged(TextualMessage):
        """Message sent whenever the draft text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []
        self._history_index: int = -1

    def compose(self):
        text_area = TextArea(id="chat-input", show_line_numbers=False)
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="success").with_tooltip(
            "Send message (Ctrl+J)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", TextArea)
        text_area.focus()
        text_area.highlight_cursor_line = False

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        event.stop()
        self.post_message(self.DraftChanged(event.text_area.text))

    def on_key(self, event) -> None:
        """Handle keyboard shortcuts.

        Note: ctrl+enter cannot work in terminals (terminal doesn't pass
        ctrl/shift modifiers with Enter). Use ctrl+j as the submit shortcut.
        """
        if event.key == "ctrl+j":
            self._submit()
            event.prevent_default()
            event.stop()
        elif event.key == "up" and self._is_cursor_at_start():
            self._navigate_history(-1)
            event.prevent_default()
            event.stop()
        elif event.key == "down" and self._is_cursor_at_end():
            self._navigate_history(1)
            event.prevent_default()
            event.stop()

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", TextArea).text

    def _is_cursor_at_start(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        return text_area.cursor_location == (0, 0)

    def _is_cursor_at_end(self) -> bool:
        text_area = self.query_one("#chat-input", TextArea)
        lines = text_area.text.split("\n")
        last_row = len(lines) - 1
        last_col = len(lines[-1]) if lines else 0
        return text_area.cursor_location == (last_row, last_col)

    def _navigate_history(self, direction: int) -> None:
        if not self._history:
            return
        text_area = self.query_one("#chat-input", TextArea)
        if direction < 0:  # Up
            if self._history_index == -1:
                self._history_index = len(self._history) - 1
            elif self._history_index > 0:
                self._history_index -= 1
        else:  # Down
            if self._history_index < len(self._history) - 1:
                self._history_index += 1
            else:
                self._history_index = -1
                text_area.text = ""
                return
        text_area.text = self._history[self._history_index]

    def _submit(self) -> None:
        value = self.text
        if value.strip():
            self.post_message(self.Submitted(value))

    def accept(self, value: str) -> None:
        """Record an accepted prompt in the input history and clear the box."""
        value = value.strip()
        if not self._history or self._history[-1] != value:
            self._history.append(value)
            del self._history[:-INPUT_HISTORY_MAX_SIZE]
        self._history_index = -1
        self.query_one("#chat-input", TextArea).text = ""

    def set_busy(self, busy: bool) -> None:
        """Disable the Send button while a reply is outstanding."""
        self.query_one("#send-btn", Button).disabled = busy

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", TextArea).focus()


class StatusBar(Static):
    """One-line status: endpoint, message count, request state."""

    def __init__(self, endpoint: str = "", *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._endpoint = endpoint
        self._messages = 0
        self._waiting = False

    def on_mount(self) -> None:
        self._update_display()

    def update_status(self, messages: int | None = None, waiting: bool | None = None) -> None:
        if messages is not None:
            self._messages = messages
        if waiting is not None:
            self._waiting = waiting
        self._update_display()

    def _update_display(self) -> None:
        state = "[bold yellow]waiting for reply[/]" if self._waiting else "[green]idle[/]"
        self.update(
            f"[bold cyan]Endpoint:[/] {self._endpoint}  "
            f"[bold magenta]Messages:[/] {self._messages}  "
            f"[bold]Status:[/] {state}"
        )


class TypingIndicator(Static):
    """Placeholder bot line shown while a reply is outstanding."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(f"{BOT_AVATAR} {TYPING_TEXT}", *args, **kwargs)

    def on_mount(self) -> None:
        self.display = False


class DebugPanel(RichLog):
    """Log panel for diagnostic records with level filtering.

    Shows timestamped log records from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Diagnostics"

    def __init__(self, *args, log_level: int = LogLevel.INFO, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=False,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def log(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (dispatcher, endpoint, TUI, ...)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)

        level_colors = {
            LogLevel.DEBUG: "dim",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        level_color = level_colors.get(level, "white")

        if len(message) > LOG_MAX_MESSAGE_LENGTH:
            message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."

        line = Text()
        line.append(f"{timestamp} ", style="dim")
        line.append(f"{LogLevel.name(level):<7}", style=level_color)
        line.append(f"[{component}] ", style="bold")
        line.append(message)
        self.write(line)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True

    def get_plain_text(self) -> str:
        """Get plain text content of the log for copying."""
        return "\n".join(line.text for line in self.lines)

    def on_click(self, event: Click) -> None:
        """Copy log content to clipboard when clicked."""
        event.stop()
        text = self.get_plain_text()
        if not text.strip():
            self.app.notify("Log is empty", timeout=2)
            return
        self.app.copy_to_clipboard(text)
        self.app.notify("Log copied", timeout=2)


class ChatHistoryWidget(VerticalScroll):
    """Scrollable conversation thread, one block per message."""

    BORDER_TITLE = "Chat"
    BORDER_SUBTITLE = "No messages yet"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._message_count = 0

    def compose(self):
        yield Static("Type a message below and press Send (Ctrl+J).", id="chat-placeholder")

    @property
    def message_count(self) -> int:
        return self._message_count

    def add_message(self, message: Message) -> None:
        """Render a message at the bottom of the thread."""
        if self._message_count == 0:
            for placeholder in self.query("#chat-placeholder"):
                placeholder.remove()

        self._message_count += 1
        self.border_subtitle = f"{self._message_count} messages"
        self.mount(self._render_message(message))
        self.scroll_end(animate=False)

    def _render_message(self, message: Message) -> Vertical:
        if message.sender == Sender.USER:
            header = f"You {USER_AVATAR}"
            classes = "chat-message user-message"
            content = Static(Text(message.text), classes="message-content")
        elif message.is_error:
            header = f"{BOT_AVATAR} Bot"
            classes = "chat-message bot-message error-message"
            content = Static(Text(message.text), classes="message-content")
        else:
            header = f"{BOT_AVATAR} Bot"
            classes = "chat-message bot-message"
            content = Markdown(message.text, classes="message-content")

        container = Vertical(classes=classes)
        container.compose_add_child(Static(Text(header), classes="message-header"))
        container.compose_add_child(content)
        container.compose_add_child(Static(message.time, classes="message-time"))
        return container
