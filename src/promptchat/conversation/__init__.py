from .models import ERROR_TEXT, Message, Sender
from .store import ConversationListener, ConversationStore

__all__ = [
    "ERROR_TEXT",
    "ConversationListener",
    "ConversationStore",
    "Message",
    "Sender",
]
