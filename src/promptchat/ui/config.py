"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Values match the ``logging`` module so records map one-to-one.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)

    @classmethod
    def from_record_level(cls, levelno: int) -> int:
        """Clamp a ``logging`` level number onto the four panel levels."""
        if levelno >= cls.ERROR:
            return cls.ERROR
        if levelno >= cls.WARNING:
            return cls.WARNING
        if levelno >= cls.INFO:
            return cls.INFO
        return cls.DEBUG


APP_TITLE = "AI Chatbot"

# Avatars shown in message headers
USER_AVATAR = "🧑"
BOT_AVATAR = "🤖"

TYPING_TEXT = "Typing..."

# Input history configuration
INPUT_HISTORY_MAX_SIZE = 100  # Maximum entries in input history

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Theme names registered by the app
LIGHT_THEME = "catppuccin-latte"
DARK_THEME = "catppuccin-mocha"
