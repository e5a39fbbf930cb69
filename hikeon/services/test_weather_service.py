import pytest

from hikeon.config import OPEN_METEO_FORECAST_URL, OPEN_METEO_GEOCODE_URL
from hikeon.errors import ExternalAPIError
from hikeon.services.weather import WeatherService

SEATTLE_CITY = {
    "results": [
        {"name": "Seattle", "country_code": "US", "latitude": 47.60621, "longitude": -122.33207}
    ]
}

SEATTLE_FORECAST = {
    "current_weather": {
        "time": "2024-05-01T12:00",
        "temperature": 15.0,
        "windspeed": 9.4,
        "winddirection": 200,
        "is_day": 1,
        "weathercode": 2,
    }
}


def test_get_current_weather(settings, upstream, fake_response):
    upstream.add(OPEN_METEO_GEOCODE_URL, fake_response(SEATTLE_CITY))
    upstream.add(OPEN_METEO_FORECAST_URL, fake_response(SEATTLE_FORECAST))
    weather = WeatherService(settings).get_current_weather("Seattle")
    assert weather.city == "Seattle"
    assert weather.temperature_c == 15.0
    assert weather.weather_description == "Partly cloudy"
    assert upstream.params_for(OPEN_METEO_FORECAST_URL) == [
        {"latitude": 47.60621, "longitude": -122.33207, "current_weather": "true"}
    ]


def test_unknown_city_returns_none(settings, upstream, fake_response):
    upstream.add(OPEN_METEO_GEOCODE_URL, fake_response({"generationtime_ms": 0.5}))
    assert WeatherService(settings).get_current_weather("Loooonnddonnn") is None
    assert upstream.params_for(OPEN_METEO_FORECAST_URL) == []


def test_missing_current_weather_returns_none(settings, upstream, fake_response):
    upstream.add(OPEN_METEO_GEOCODE_URL, fake_response(SEATTLE_CITY))
    upstream.add(OPEN_METEO_FORECAST_URL, fake_response({"latitude": 47.6}))
    assert WeatherService(settings).get_current_weather("Seattle") is None


def test_malformed_current_weather_raises(settings, upstream, fake_response):
    upstream.add(OPEN_METEO_GEOCODE_URL, fake_response(SEATTLE_CITY))
    upstream.add(OPEN_METEO_FORECAST_URL, fake_response({"current_weather": {"time": "2024-05-01T12:00"}}))
    with pytest.raises(ExternalAPIError):
        WeatherService(settings).get_current_weather("Seattle")


def test_upstream_failure_raises(settings, upstream, fake_response):
    upstream.add(OPEN_METEO_GEOCODE_URL, fake_response({}, status_code=502))
    with pytest.raises(ExternalAPIError):
        WeatherService(settings).get_current_weather("Seattle")


def test_non_numeric_city_coordinates_raise(settings, upstream, fake_response):
    upstream.add(
        OPEN_METEO_GEOCODE_URL,
        fake_response({"results": [{"name": "Seattle", "latitude": "north", "longitude": -122.3}]}),
    )
    with pytest.raises(ExternalAPIError):
        WeatherService(settings).get_current_weather("Seattle")
    assert upstream.params_for(OPEN_METEO_FORECAST_URL) == []
