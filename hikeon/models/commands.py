"""Command objects the UI hands to controllers instead of widget references."""

from pydantic import BaseModel, ConfigDict


class _Command(BaseModel):
    model_config = ConfigDict(frozen=True)


class WeatherRequest(_Command):
    city: str | None = None


class HikingSearchRequest(_Command):
    location: str | None = None


class SuggestionRequest(_Command):
    text: str | None = None


class ChatMessage(_Command):
    session_id: str
    text: str | None = None
