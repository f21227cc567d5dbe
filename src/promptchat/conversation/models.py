"""Data models for the conversation.

These models define a chat entry independently of how it is rendered
(terminal UI, console REPL) or where the reply came from.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

TIME_FORMAT = "%H:%M:%S"

ERROR_TEXT = "Error: Unable to fetch response."


class Sender(str, Enum):
    """Who authored a message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """One entry in the conversation.

    Messages are frozen: once appended to the history they never change.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender = Field(description="Author of the message: 'user' or 'bot'")
    text: str = Field(description="Display text of the message")
    timestamp: datetime = Field(default_factory=datetime.now)

    @property
    def time(self) -> str:
        """Human-readable creation time."""
        return self.timestamp.strftime(TIME_FORMAT)

    @property
    def is_error(self) -> bool:
        return self.sender == Sender.BOT and self.text == ERROR_TEXT
