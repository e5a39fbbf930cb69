import pytest

from hikeon.controllers.location import LocationController
from hikeon.errors import ExternalAPIError, LocationNotFoundError
from hikeon.models.commands import HikingSearchRequest, SuggestionRequest
from hikeon.models.hiking_spot import HikingSpot


class FakeLocationService:
    def __init__(self, spots=None, error=None, suggestions=None):
        self.spots = spots or []
        self.error = error
        self.suggestions = suggestions or []
        self.calls = []

    def search_hiking_spots(self, location):
        self.calls.append(("search", location))
        if self.error:
            raise self.error
        return self.spots

    def suggest_locations(self, text):
        self.calls.append(("suggest", text))
        return self.suggestions


def test_lists_hiking_spots_in_order():
    service = FakeLocationService(
        spots=[
            HikingSpot(name="Mount Si", latitude=47.488, longitude=-121.723, rating=4.7, total_ratings=3000),
            HikingSpot(name="Quiet Loop", latitude=47.5, longitude=-121.8),
        ]
    )
    text = LocationController(service).search_hiking_spots(HikingSearchRequest(location="North Bend"))
    assert text.splitlines()[0] == "Hiking trails near North Bend:"
    assert text.index("1. Mount Si") < text.index("2. Quiet Loop")
    assert "4.7/5 (3000 reviews)" in text
    assert "No rating" in text
    assert service.calls == [("search", "North Bend")]


@pytest.mark.parametrize("location", [None, "", "  "])
def test_blank_location_is_rejected_inline(location):
    service = FakeLocationService()
    text = LocationController(service).search_hiking_spots(HikingSearchRequest(location=location))
    assert text == "Please enter a location."
    assert service.calls == []


def test_unknown_location_message():
    service = FakeLocationService(error=LocationNotFoundError("Location not found: Nowhere12345"))
    text = LocationController(service).search_hiking_spots(HikingSearchRequest(location="Nowhere12345"))
    assert text == "Could not find location: Nowhere12345."


def test_no_spots_message():
    text = LocationController(FakeLocationService()).search_hiking_spots(
        HikingSearchRequest(location="Antarctica")
    )
    assert text == "No hiking trails found near Antarctica."


def test_api_error_propagates():
    service = FakeLocationService(error=ExternalAPIError("Hiking trail search failed"))
    with pytest.raises(ExternalAPIError):
        LocationController(service).search_hiking_spots(HikingSearchRequest(location="Seattle"))


def test_short_suggestion_input_skips_lookup():
    service = FakeLocationService(suggestions=["Seattle, WA, USA"])
    controller = LocationController(service, suggestion_min_chars=3)
    assert controller.suggest_locations(SuggestionRequest(text=" Se ")) == []
    assert controller.suggest_locations(SuggestionRequest(text="Sea")) == ["Seattle, WA, USA"]
    assert service.calls == [("suggest", "Sea")]
