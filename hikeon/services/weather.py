"""Current weather lookups against the Open-Meteo APIs."""

from pydantic import ValidationError

from hikeon.config import Settings
from hikeon.errors import ExternalAPIError
from hikeon.http_client import HttpClient
from hikeon.logging_config import logger
from hikeon.models.geo_location import GeoLocation
from hikeon.models.weather import Weather


class WeatherService:
    """Fetch current conditions for a city by name."""

    def __init__(self, settings: Settings, http_client: HttpClient | None = None):
        self.settings = settings
        self.http_client = http_client or HttpClient.from_settings(settings)

    def get_city_location(self, city: str) -> GeoLocation | None:
        """Resolve a city name with the Open-Meteo geocoding API.

        Args:
            city: City name to look up.

        Returns:
            Coordinates of the first match, or None when nothing matches.

        Raises:
            ExternalAPIError: If the request fails or the payload is invalid.
        """
        data = self.http_client.get_json(
            self.settings.weather_geocode_url,
            {"name": city, "count": 1},
            event_prefix="CITY_LOOKUP",
            log_context={"city": city},
            error_message="City lookup failed",
        )

        try:
            results = data.get("results") or []
            if not results:
                logger.info("CITY_NOT_FOUND", city=city)
                return None
            return GeoLocation(
                latitude=results[0]["latitude"], longitude=results[0]["longitude"]
            )
        except (TypeError, KeyError, AttributeError, ValidationError) as exc:
            logger.error("CITY_LOOKUP_BAD_PAYLOAD", city=city, error=str(exc))
            raise ExternalAPIError("City lookup failed") from exc

    def get_current_weather(self, city: str) -> Weather | None:
        """Return current weather for ``city``.

        Args:
            city: City name to look up.

        Returns:
            A Weather model, or None when no data is found for the city.

        Raises:
            ExternalAPIError: If either API call fails or returns bad data.
        """
        location = self.get_city_location(city)
        if location is None:
            return None

        data = self.http_client.get_json(
            self.settings.weather_forecast_url,
            {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "current_weather": "true",
            },
            event_prefix="WEATHER",
            log_context={"city": city},
            error_message="Weather lookup failed",
        )

        if not isinstance(data, dict) or "current_weather" not in data:
            logger.warning("WEATHER_NO_CURRENT_DATA", city=city)
            return None
        try:
            return Weather.from_api_response(city, data)
        except (TypeError, KeyError, ValueError) as exc:
            logger.error("WEATHER_BAD_PAYLOAD", city=city, error=str(exc))
            raise ExternalAPIError("Weather lookup failed") from exc
