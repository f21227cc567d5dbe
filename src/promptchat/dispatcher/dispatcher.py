"""Message dispatcher.

Runs one request/response cycle: records the user's prompt, calls the
endpoint, normalizes the reply and records exactly one bot message, either
the reply or the fixed error text.
"""

import logging

from ..conversation import ConversationStore, Message
from ..endpoint import EndpointError, InferenceEndpoint, ensure_success
from .normalize import ResponseShapeError, normalize_reply

logger = logging.getLogger(__name__)


class MessageDispatcher:
    """Orchestrates prompt submission against a single endpoint.

    The store's ``in_flight`` flag is the only concurrency guard: while a
    cycle is outstanding further submissions are ignored, not queued.

    ``submit`` runs a whole cycle. UIs that must record the prompt before
    handing the network call to a background worker can split it into
    ``begin`` (synchronous) and ``complete`` (awaits the reply).
    """

    def __init__(self, store: ConversationStore, endpoint: InferenceEndpoint) -> None:
        self._store = store
        self._endpoint = endpoint

    @property
    def store(self) -> ConversationStore:
        return self._store

    @property
    def endpoint(self) -> InferenceEndpoint:
        return self._endpoint

    async def submit(self, prompt: str | None = None) -> Message | None:
        """Submit a prompt and wait for the cycle to complete.

        Args:
            prompt: Text to send; defaults to the store's pending draft

        Returns:
            The bot message appended for this cycle (reply or error), or None
            if the submission was ignored
        """
        text = self.begin(prompt)
        if text is None:
            return None
        return await self.complete(text)

    def begin(self, prompt: str | None = None) -> str | None:
        """Record the user's message and open a cycle.

        Returns:
            The accepted prompt, or None if it was blank or a request is
            already in flight
        """
        text = self._store.pending_input if prompt is None else prompt

        if self._store.append_user_message(text) is None:
            logger.debug(
                "Submission ignored (%s)",
                "request in flight" if self._store.in_flight else "blank prompt",
            )
            return None
        return text

    async def complete(self, text: str) -> Message:
        """Fetch the reply for a cycle opened by ``begin`` and record it.

        Never raises for transport or shape errors; those become the fixed
        error message. The cycle is closed on every exit path.
        """
        if not self._store.in_flight:
            raise RuntimeError("complete() called without an open cycle; call begin() first")

        logger.info("Sending prompt via %s endpoint: %r", self._endpoint.name, text[:50])

        result: Message | None = None
        try:
            reply = ensure_success(await self._endpoint.fetch(text))
            content = normalize_reply(reply.body, reply.content_type)
        except EndpointError as e:
            logger.error("Transport error: %s", e)
            result = self._store.append_error_message()
        except ResponseShapeError as e:
            logger.error("Unrecognized reply from %s: %s", self._endpoint.url, e)
            result = self._store.append_error_message()
        except Exception:
            logger.exception("Unexpected error while dispatching prompt")
            result = self._store.append_error_message()
        else:
            logger.info("Received reply (%d chars)", len(content))
            result = self._store.append_bot_message(content)
        finally:
            if self._store.in_flight:
                # Cancelled before completing: the cycle still ends with one reply.
                logger.warning("Dispatch interrupted before a reply was recorded")
                self._store.append_error_message()

        return result
