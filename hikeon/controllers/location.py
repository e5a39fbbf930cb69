"""Render hiking trail searches and location suggestions."""

from hikeon.errors import LocationNotFoundError
from hikeon.models.commands import HikingSearchRequest, SuggestionRequest
from hikeon.models.hiking_spot import HikingSpot
from hikeon.services.location import LocationService

EMPTY_LOCATION_MESSAGE = "Please enter a location."


def format_hiking_spot(index: int, spot: HikingSpot) -> str:
    if spot.has_rating:
        rating = f"{spot.rating:g}/5"
        if spot.total_ratings >= 0:
            rating += f" ({spot.total_ratings} reviews)"
    else:
        rating = "No rating"
    return (
        f"{index}. {spot.name}\n"
        f"   Rating: {rating}\n"
        f"   Location: {spot.latitude:.5f}, {spot.longitude:.5f}"
    )


class LocationController:
    def __init__(self, location_service: LocationService, suggestion_min_chars: int = 3):
        self.location_service = location_service
        self.suggestion_min_chars = suggestion_min_chars

    def search_hiking_spots(self, request: HikingSearchRequest) -> str:
        """Return a numbered list of hiking trails near the requested location.

        Raises:
            ExternalAPIError: If a remote call fails; the caller reports it.
        """
        location = (request.location or "").strip()
        if not location:
            return EMPTY_LOCATION_MESSAGE

        try:
            spots = self.location_service.search_hiking_spots(location)
        except LocationNotFoundError:
            return f"Could not find location: {location}."

        if not spots:
            return f"No hiking trails found near {location}."
        lines = [f"Hiking trails near {location}:"]
        lines.extend(format_hiking_spot(i, spot) for i, spot in enumerate(spots, start=1))
        return "\n".join(lines)

    def suggest_locations(self, request: SuggestionRequest) -> list[str]:
        text = (request.text or "").strip()
        if len(text) < self.suggestion_min_chars:
            return []
        return self.location_service.suggest_locations(text)
