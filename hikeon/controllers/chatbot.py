"""Conversation handling for the chatbot window."""

import threading

from structlog.contextvars import bound_contextvars

from hikeon.logging_config import logger
from hikeon.models.commands import ChatMessage
from hikeon.services.chatbot import ChatbotService

INVALID_MESSAGE = "System: Please enter a valid message.\n"
ERROR_MESSAGE = "System: An error occurred while processing your request. Please try again.\n"


class ChatbotController:
    """Keeps one session id and an append-only transcript per chat window.

    At most one exchange is in flight at a time; ``new_message`` returns None
    while a reply is pending.
    """

    def __init__(self, chatbot_service: ChatbotService):
        self.chatbot_service = chatbot_service
        self.session_id: str | None = None
        self._transcript: list[str] = []
        self._lock = threading.Lock()
        self._in_flight = False

    @property
    def transcript(self) -> str:
        with self._lock:
            return "".join(self._transcript)

    @property
    def in_flight(self) -> bool:
        with self._lock:
            return self._in_flight

    def start_chat_session(self) -> str:
        self.session_id = self.chatbot_service.start_session()
        return self.session_id

    def new_message(self, text: str | None) -> ChatMessage | None:
        if self.session_id is None:
            self.start_chat_session()
        with self._lock:
            if self._in_flight:
                return None
            if text and text.strip():
                self._in_flight = True
        return ChatMessage(session_id=self.session_id, text=text)

    def _append(self, entry: str) -> str:
        with self._lock:
            self._transcript.append(entry)
            return "".join(self._transcript)

    def handle_user_message(self, message: ChatMessage) -> str:
        """Forward one message and append the exchange to the transcript.

        Returns:
            The full transcript after this exchange.
        """
        text = (message.text or "").strip()
        if not text:
            return self._append(INVALID_MESSAGE)

        try:
            with bound_contextvars(session_id=message.session_id):
                try:
                    reply = self.chatbot_service.get_chatbot_response(message.session_id, text)
                except Exception as exc:
                    logger.exception("CHATBOT_EXCHANGE_FAILED", error=str(exc))
                    return self._append(ERROR_MESSAGE)
            return self._append(f"User: {text}\nAI: {reply}\n")
        finally:
            with self._lock:
                self._in_flight = False
