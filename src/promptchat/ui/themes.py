"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, etc.)
- Dark/light mode configuration

The app toggles between exactly these two themes.
"""

from textual.theme import Theme

from .config import DARK_THEME, LIGHT_THEME

# Catppuccin Mocha: dark mode
CATPPUCCIN_MOCHA = Theme(
    name=DARK_THEME,
    primary="#89b4fa",      # Blue - main accent
    secondary="#cba6f7",    # Mauve - bot messages
    accent="#f9e2af",       # Yellow - highlights
    foreground="#cdd6f4",   # Text
    background="#11111b",   # Crust
    success="#a6e3a1",      # Green - user messages, send button
    warning="#fab387",      # Peach - typing indicator
    error="#f38ba8",        # Red - error replies
    surface="#1e1e2e",      # Base
    panel="#181825",        # Mantle
    dark=True,
    variables={
        "block-cursor-foreground": "#11111b",
        "block-cursor-background": "#f5e0dc",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#cdd6f4",
        "input-cursor-foreground": "#11111b",
        "input-selection-background": "#89b4fa 30%",
        "border": "#45475a",
        "border-blurred": "#313244",
        "scrollbar": "#313244",
        "scrollbar-hover": "#45475a",
        "scrollbar-active": "#89b4fa",
        "scrollbar-background": "#181825",
        "footer-foreground": "#bac2de",
        "footer-background": "#11111b",
        "footer-key-foreground": "#f9e2af",
        "footer-key-background": "#313244",
        "text-muted": "#6c7086",
        "text-disabled": "#45475a",
        "button-foreground": "#cdd6f4",
        "button-color-foreground": "#11111b",
        "button-focus-text-style": "bold reverse",
    },
)

# Catppuccin Latte: light mode (the default)
CATPPUCCIN_LATTE = Theme(
    name=LIGHT_THEME,
    primary="#1e66f5",      # Blue
    secondary="#8839ef",    # Mauve
    accent="#df8e1d",       # Yellow
    foreground="#4c4f69",   # Text
    background="#dce0e8",   # Crust
    success="#40a02b",      # Green
    warning="#fe640b",      # Peach
    error="#d20f39",        # Red
    surface="#eff1f5",      # Base
    panel="#e6e9ef",        # Mantle
    dark=False,
    variables={
        "block-cursor-foreground": "#eff1f5",
        "block-cursor-background": "#dc8a78",
        "block-cursor-text-style": "bold",
        "input-cursor-background": "#4c4f69",
        "input-cursor-foreground": "#eff1f5",
        "input-selection-background": "#1e66f5 25%",
        "border": "#bcc0cc",
        "border-blurred": "#ccd0da",
        "scrollbar": "#ccd0da",
        "scrollbar-hover": "#bcc0cc",
        "scrollbar-active": "#1e66f5",
        "scrollbar-background": "#e6e9ef",
        "footer-foreground": "#5c5f77",
        "footer-background": "#dce0e8",
        "footer-key-foreground": "#df8e1d",
        "footer-key-background": "#ccd0da",
        "text-muted": "#8c8fa1",
        "text-disabled": "#bcc0cc",
        "button-foreground": "#4c4f69",
        "button-color-foreground": "#eff1f5",
        "button-focus-text-style": "bold reverse",
    },
)


def theme_name(dark_mode: bool) -> str:
    """Theme to use for the given theme flag."""
    return DARK_THEME if dark_mode else LIGHT_THEME
