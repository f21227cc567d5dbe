from .dispatcher import MessageDispatcher
from .normalize import NO_RESPONSE_TEXT, ResponseShapeError, normalize_data, normalize_reply

__all__ = [
    "NO_RESPONSE_TEXT",
    "MessageDispatcher",
    "ResponseShapeError",
    "normalize_data",
    "normalize_reply",
]
