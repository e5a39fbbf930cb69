"""Render current weather for the main window."""

from hikeon.errors import ExternalAPIError
from hikeon.logging_config import logger
from hikeon.models.commands import WeatherRequest
from hikeon.models.weather import Weather
from hikeon.services.weather import WeatherService

EMPTY_LOCATION_MESSAGE = "Please enter a location."


def format_weather(weather: Weather) -> str:
    """Build the multi-line weather block shown in the display area."""
    return (
        f"Weather in {weather.city}\n"
        f"Conditions: {weather.weather_description}\n"
        f"Temperature: {weather.temperature_c:g}°C\n"
        f"Wind: {weather.windspeed_kmh:g} km/h from {weather.winddirection_deg}°\n"
        f"{'Daytime' if weather.is_day else 'Night'} "
        f"(observed {weather.time:%Y-%m-%d %H:%M})"
    )


class WeatherController:
    def __init__(self, weather_service: WeatherService):
        self.weather_service = weather_service

    def get_formatted_weather(self, request: WeatherRequest) -> str:
        """Fetch and format weather for the requested city.

        Blank input is answered inline without calling the service.
        """
        city = (request.city or "").strip()
        if not city:
            return EMPTY_LOCATION_MESSAGE

        try:
            weather = self.weather_service.get_current_weather(city)
        except ExternalAPIError as exc:
            logger.error("WEATHER_DISPLAY_FAILED", city=city, error=str(exc))
            return f"Unable to fetch weather for {city}. Please try again."

        if weather is None:
            return f"No weather data found for {city}."
        return format_weather(weather)
