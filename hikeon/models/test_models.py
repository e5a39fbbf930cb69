import pytest
from pydantic import ValidationError

from hikeon.models.geo_location import GeoLocation
from hikeon.models.hiking_spot import HikingSpot
from hikeon.models.weather import Weather


def test_geo_location_is_a_value():
    assert GeoLocation(latitude=47.6, longitude=-122.3) == GeoLocation(latitude=47.6, longitude=-122.3)
    assert GeoLocation(latitude=47.6, longitude=-122.3).as_param() == "47.6,-122.3"
    with pytest.raises(ValidationError):
        GeoLocation(latitude=1.0, longitude=2.0).latitude = 3.0


def test_hiking_spot_from_complete_result():
    spot = HikingSpot.from_api_result(
        {
            "name": "Rattlesnake Ledge",
            "geometry": {"location": {"lat": 47.4347, "lng": -121.7686}},
            "rating": 4.7,
            "user_ratings_total": 5210,
        }
    )
    assert spot == HikingSpot(
        name="Rattlesnake Ledge",
        latitude=47.4347,
        longitude=-121.7686,
        rating=4.7,
        total_ratings=5210,
    )
    assert spot.has_rating


def test_hiking_spot_missing_ratings_become_sentinel():
    spot = HikingSpot.from_api_result(
        {"name": "Unrated Loop", "geometry": {"location": {"lat": 1.0, "lng": 2.0}}}
    )
    assert spot.rating == -1
    assert spot.total_ratings == -1
    assert not spot.has_rating


def test_hiking_spot_keeps_zero_rating():
    spot = HikingSpot.from_api_result(
        {
            "name": "Muddy Path",
            "geometry": {"location": {"lat": 1.0, "lng": 2.0}},
            "rating": 0,
            "user_ratings_total": 0,
        }
    )
    assert spot.rating == 0
    assert spot.total_ratings == 0


def test_weather_from_api_response_maps_code():
    weather = Weather.from_api_response(
        "Seattle",
        {
            "current_weather": {
                "time": "2024-05-01T12:00",
                "temperature": 15.0,
                "windspeed": 9.4,
                "winddirection": 200,
                "is_day": 1,
                "weathercode": 3,
            }
        },
    )
    assert weather.city == "Seattle"
    assert weather.temperature_c == 15.0
    assert weather.is_day is True
    assert weather.weather_description == "Overcast"


def test_weather_unknown_code():
    weather = Weather.from_api_response(
        "Seattle",
        {
            "current_weather": {
                "time": "2024-05-01T00:00",
                "temperature": 8.5,
                "windspeed": 2.0,
                "winddirection": 90,
                "is_day": 0,
                "weathercode": 42,
            }
        },
    )
    assert weather.weather_description == "Unknown"
    assert weather.is_day is False
