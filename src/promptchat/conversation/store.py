"""Conversation store.

Holds the ordered chat history and the transient UI flags of one session.
The history only grows through the append operations below; nothing is ever
removed, edited or reordered. Observers registered with ``subscribe`` are told
about every change but get read-only access.
"""

from typing import Protocol

from .models import ERROR_TEXT, Message, Sender


class ConversationListener(Protocol):
    """Observer notified of store changes."""

    def message_appended(self, message: Message) -> None: ...

    def in_flight_changed(self, in_flight: bool) -> None: ...

    def theme_changed(self, dark_mode: bool) -> None: ...


class ConversationStore:
    """Session-scoped conversation state.

    Example:
        store = ConversationStore()
        store.append_user_message("ping")   # in_flight is now True
        store.append_bot_message("pong")    # in_flight is now False
    """

    def __init__(self, dark_mode: bool = False) -> None:
        self._history: list[Message] = []
        self._pending_input = ""
        self._in_flight = False
        self._dark_mode = dark_mode
        self._listeners: list[ConversationListener] = []

    @property
    def history(self) -> tuple[Message, ...]:
        return tuple(self._history)

    @property
    def pending_input(self) -> str:
        return self._pending_input

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def subscribe(self, listener: ConversationListener) -> None:
        """Register an observer for appended messages and flag changes."""
        self._listeners.append(listener)

    def update_draft(self, text: str) -> None:
        """Mirror the current draft text of the input box."""
        self._pending_input = text

    def toggle_theme(self) -> bool:
        """Flip the theme flag and return the new value."""
        self._dark_mode = not self._dark_mode
        for listener in self._listeners:
            listener.theme_changed(self._dark_mode)
        return self._dark_mode

    def append_user_message(self, text: str) -> Message | None:
        """Append a user message and mark a request as in flight.

        Returns:
            The appended message, or None when ``text`` is blank or another
            request is still outstanding (nothing changes in that case).
        """
        if not text or not text.strip() or self._in_flight:
            return None

        message = Message(sender=Sender.USER, text=text)
        self._append(message)
        self._pending_input = ""
        self._set_in_flight(True)
        return message

    def append_bot_message(self, text: str) -> Message:
        """Append a bot reply and end the in-flight cycle."""
        message = Message(sender=Sender.BOT, text=text)
        self._append(message)
        self._set_in_flight(False)
        return message

    def append_error_message(self) -> Message:
        """Append the fixed error reply and end the in-flight cycle."""
        return self.append_bot_message(ERROR_TEXT)

    def last_bot_message(self) -> Message | None:
        for message in reversed(self._history):
            if message.sender == Sender.BOT:
                return message
        return None

    def _append(self, message: Message) -> None:
        self._history.append(message)
        for listener in self._listeners:
            listener.message_appended(message)

    def _set_in_flight(self, value: bool) -> None:
        if self._in_flight == value:
            return
        self._in_flight = value
        for listener in self._listeners:
            listener.in_flight_changed(value)
