"""HikeOn entry point: load settings, wire services and open the main window."""

from hikeon.config import Settings
from hikeon.controllers.location import LocationController
from hikeon.controllers.weather import WeatherController
from hikeon.http_client import HttpClient
from hikeon.logging_config import configure_logging, logger
from hikeon.services.chatbot import ChatbotService
from hikeon.services.location import LocationService
from hikeon.services.weather import WeatherService


def build_controllers(settings: Settings):
    """Create the services and controllers shared by the UI.

    Returns:
        A tuple of (WeatherController, LocationController, ChatbotService).
    """
    http_client = HttpClient.from_settings(settings)
    weather_controller = WeatherController(WeatherService(settings, http_client))
    location_controller = LocationController(
        LocationService(settings, http_client),
        suggestion_min_chars=settings.suggestion_min_chars,
    )
    return weather_controller, location_controller, ChatbotService(settings, http_client)


def main():
    settings = Settings.load()
    configure_logging(settings.log_level)
    logger.info("HIKEON_STARTING")

    import tkinter as tk

    from hikeon.ui.main_frame import MainFrame

    weather_controller, location_controller, chatbot_service = build_controllers(settings)
    root = tk.Tk()
    MainFrame(root, weather_controller, location_controller, chatbot_service)
    root.mainloop()


if __name__ == "__main__":
    main()
