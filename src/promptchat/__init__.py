"""
promptchat: a small chat client for a hosted text-generation endpoint.

Each module hides one design decision:
- conversation: how the chat history and UI flags are held
- endpoint: where prompts are sent and how
- dispatcher: how one prompt becomes exactly one reply
- relay: the same-origin proxy route
"""

__version__ = "0.1.0"

from .conversation import ConversationStore, Message, Sender
from .dispatcher import MessageDispatcher, normalize_reply
from .endpoint import EndpointError, InferenceEndpoint, create_endpoint

__all__ = [
    "ConversationStore",
    "EndpointError",
    "InferenceEndpoint",
    "Message",
    "MessageDispatcher",
    "Sender",
    "create_endpoint",
    "normalize_reply",
]
