"""Client for the HikeOn assistant chatbot endpoint."""

import json
import uuid

from hikeon.config import Settings
from hikeon.http_client import HttpClient
from hikeon.logging_config import logger

REPLY_FIELDS = ("response", "reply", "message")


class ChatbotService:
    """Forward user messages to the chatbot backend."""

    def __init__(self, settings: Settings, http_client: HttpClient | None = None):
        self.settings = settings
        self.http_client = http_client or HttpClient.from_settings(settings)

    def start_session(self) -> str:
        """Return a new opaque session id. No request is made."""
        session_id = str(uuid.uuid4())
        logger.info("CHAT_SESSION_STARTED", session_id=session_id)
        return session_id

    def get_chatbot_response(self, session_id: str, message: str) -> str:
        """Send ``message`` for ``session_id`` and return the reply text.

        A JSON object body carrying a ``response``, ``reply`` or ``message``
        string is unwrapped; any other body is returned as-is.

        Raises:
            ExternalAPIError: If the request fails.
        """
        response = self.http_client.get(
            self.settings.chatbot_url,
            {"session_id": session_id, "message": message},
            event_prefix="CHATBOT",
            log_context={"session_id": session_id},
            error_message="Chatbot request failed",
        )
        return extract_reply(response.text)


def extract_reply(body: str) -> str:
    try:
        data = json.loads(body)
    except ValueError:
        return body
    if isinstance(data, dict):
        for field in REPLY_FIELDS:
            if isinstance(data.get(field), str):
                return data[field]
    return body
