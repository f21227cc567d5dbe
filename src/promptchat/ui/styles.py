"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
/* ============================================
   Main Screen Layout - single column
   ============================================ */
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#chat-placeholder {
    color: $text-muted;
    padding: 1 2;
}

/* ============================================
   Typing Indicator
   ============================================ */
#typing-indicator {
    height: 1;
    padding: 0 2;
    color: $warning;
    text-style: italic;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    overflow-y: scroll;
    overflow-x: auto;
    scrollbar-gutter: stable;

    &:focus {
        border: round $warning;
    }
}

/* ============================================
   Bottom Bar - Status + Input
   ============================================ */
#bottom-bar {
    height: auto;
    padding: 0 1 1 1;
    background: $panel;
    border-top: solid $border;
}

#status-bar {
    height: 1;
    padding: 0 2;
    margin-bottom: 1;
    background: $surface;
    color: $foreground;
}

ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;

    &:focus {
        background: transparent;
    }
}

#send-btn {
    width: 10;
    height: 100%;
    margin: 0 0 0 1;
    min-width: 8;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:hover {
        background: $success-lighten-1;
        border: tall $success-lighten-1;
    }

    &:disabled {
        background: $surface;
        border: tall $border;
        color: $text-disabled;
    }
}

/* ============================================
   Chat Messages
   ============================================ */
.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 1 2;
    background: transparent;
}

.message-header {
    height: auto;
    text-style: bold;
}

.message-content {
    height: auto;
    padding: 0;
    margin: 0;
    color: $foreground;
}

.message-time {
    height: 1;
    color: $text-muted;
    text-align: right;
}

/* User messages - right-hand side, green accent */
.user-message {
    border-right: tall $success;
    background: $success 8%;
    margin-left: 8;

    & .message-header {
        color: $success;
        text-align: right;
    }
}

/* Bot messages - left-hand side, mauve accent */
.bot-message {
    border-left: tall $secondary;
    background: $secondary 8%;
    margin-right: 8;

    & .message-header {
        color: $secondary;
    }
}

.error-message {
    border-left: tall $error;
    background: $error 10%;

    & .message-header {
        color: $error;
    }
}

/* ============================================
   Header / Footer
   ============================================ */
Header {
    background: $panel;
    color: $foreground;
    dock: top;
    height: 1;
}

HeaderTitle {
    color: $primary;
    text-style: bold;
}

Footer {
    background: $panel;
    height: auto;
}

Toast {
    background: $surface;
    border: tall $border;
    padding: 0 1;

    &.-information {
        border: tall $primary;
    }

    &.-warning {
        border: tall $warning;
    }

    &.-error {
        border: tall $error;
    }
}

Markdown {
    margin: 0;
    padding: 0;
}

MarkdownFence {
    background: $panel;
    border: round $border;
    margin: 1 0;
    padding: 1;
}

* {
    scrollbar-background: $panel;
    scrollbar-color: $surface-lighten-1;
    scrollbar-color-hover: $primary 50%;
    scrollbar-color-active: $primary;
    scrollbar-size: 1 1;
}
"""
