"""Terminal UI module for promptchat.

Provides a Textual-based TUI over the ConversationStore.

Module structure (each module hides a design decision):
- config.py: Constants (avatars, log levels, theme names)
- widgets.py: Custom widgets (input history, status line, log rendering, messages)
- styles.py: CSS styling (layout decisions)
- themes.py: Light and dark color palettes
- callbacks.py: Store and logging integration (how the TUI receives updates)
- app.py: Application orchestration (user interaction flow)
"""

from .app import ChatApp, run_textual_tui
from .callbacks import DebugPanelHandler, TUICallback
from .config import LogLevel
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, StatusBar, TypingIndicator

__all__ = [
    "ChatApp",
    "ChatHistoryWidget",
    "ChatInputBar",
    "DebugPanel",
    "DebugPanelHandler",
    "LogLevel",
    "StatusBar",
    "TUICallback",
    "TypingIndicator",
    "run_textual_tui",
]
