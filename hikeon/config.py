"""Application settings loaded from the environment and the local key file."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

GOOGLE_GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
GOOGLE_TEXT_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/textsearch/json"
GOOGLE_AUTOCOMPLETE_URL = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
OPEN_METEO_GEOCODE_URL = "https://geocoding-api.open-meteo.com/v1/search"
OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


class Settings(BaseSettings):
    """Runtime configuration passed explicitly into services."""

    model_config = SettingsConfigDict(
        env_file=("Google_key.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: str = Field(..., min_length=1)

    geocode_url: str = GOOGLE_GEOCODE_URL
    text_search_url: str = GOOGLE_TEXT_SEARCH_URL
    autocomplete_url: str = GOOGLE_AUTOCOMPLETE_URL
    weather_geocode_url: str = OPEN_METEO_GEOCODE_URL
    weather_forecast_url: str = OPEN_METEO_FORECAST_URL
    chatbot_url: str = "http://localhost:5005/chat"

    http_timeout_s: float = 10.0
    http_retry_attempts: int = Field(default=1, ge=1)

    search_query: str = "hiking trail"
    search_radius_m: int = 50000
    suggestion_min_chars: int = 3

    log_level: str = "INFO"

    @field_validator("google_api_key", mode="before")
    @classmethod
    def strip_api_key(cls, value):
        return value.strip() if isinstance(value, str) else value

    @classmethod
    def load(cls, **overrides) -> "Settings":
        """Build settings, exiting when the Google API key is missing.

        Args:
            overrides: Field values (or ``_env_file``) taking precedence over
                the environment.

        Returns:
            A populated Settings instance.

        Raises:
            SystemExit: If ``google_api_key`` is absent or empty.
        """
        try:
            return cls(**overrides)
        except ValidationError as exc:
            if any(err["loc"][0] == "google_api_key" for err in exc.errors()):
                raise SystemExit(
                    "Error: Google_API_KEY not found or empty.\n"
                    "Add it to 'Google_key.env' or set the GOOGLE_API_KEY environment variable."
                ) from exc
            raise
