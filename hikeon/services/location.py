"""Google Geocoding and Places lookups for hiking trail recommendations."""

from pydantic import ValidationError

from hikeon.config import Settings
from hikeon.errors import ExternalAPIError, InvalidInputError, LocationNotFoundError
from hikeon.http_client import HttpClient
from hikeon.logging_config import logger
from hikeon.models.geo_location import GeoLocation
from hikeon.models.hiking_spot import HikingSpot


class LocationService:
    """Resolve locations and search for nearby hiking trails."""

    def __init__(self, settings: Settings, http_client: HttpClient | None = None):
        self.settings = settings
        self.http_client = http_client or HttpClient.from_settings(settings)

    def _params(self, **params) -> dict:
        return {**params, "key": self.settings.google_api_key}

    def get_coordinates(self, location: str) -> GeoLocation:
        """Resolve a free-text location to coordinates.

        Args:
            location: Place name to geocode.

        Returns:
            Coordinates of the first geocoding result.

        Raises:
            InvalidInputError: If ``location`` is blank.
            LocationNotFoundError: If geocoding returns no results.
            ExternalAPIError: If the request fails or the payload is malformed.
        """
        if not location or not location.strip():
            raise InvalidInputError("Location must not be blank")
        data = self.http_client.get_json(
            self.settings.geocode_url,
            self._params(address=location),
            event_prefix="GEOCODE",
            log_context={"location": location},
            error_message="Geocoding failed",
        )

        try:
            results = data["results"]
            if not results:
                logger.info("GEOCODE_NO_RESULTS", location=location)
                raise LocationNotFoundError(f"Location not found: {location}")
            coords = results[0]["geometry"]["location"]
            return GeoLocation(latitude=coords["lat"], longitude=coords["lng"])
        except (TypeError, KeyError, ValidationError) as exc:
            logger.error("GEOCODE_BAD_PAYLOAD", location=location, error=str(exc))
            raise ExternalAPIError("Geocoding failed") from exc

    def find_nearby_hiking_spots(
        self, geo_location: GeoLocation, location: str
    ) -> list[HikingSpot]:
        """Search for hiking trails around resolved coordinates.

        Args:
            geo_location: Coordinates the search is centred on.
            location: Location text added to the search query.

        Returns:
            One HikingSpot per result, in response order.

        Raises:
            ExternalAPIError: If the request fails or a result is malformed.
        """
        data = self.http_client.get_json(
            self.settings.text_search_url,
            self._params(
                query=f"{self.settings.search_query} {location}".strip(),
                location=geo_location.as_param(),
                radius=self.settings.search_radius_m,
            ),
            event_prefix="PLACES_SEARCH",
            log_context={"location": location},
            error_message="Hiking trail search failed",
        )

        try:
            spots = [HikingSpot.from_api_result(result) for result in data.get("results") or []]
        except (TypeError, KeyError, AttributeError, ValidationError) as exc:
            logger.error("PLACES_SEARCH_BAD_PAYLOAD", location=location, error=str(exc))
            raise ExternalAPIError("Hiking trail search failed") from exc
        logger.info("PLACES_SEARCH_RESULTS", location=location, count=len(spots))
        return spots

    def search_hiking_spots(self, location: str) -> list[HikingSpot]:
        """Geocode ``location`` and return the hiking spots around it."""
        geo_location = self.get_coordinates(location)
        return self.find_nearby_hiking_spots(geo_location, location)

    def suggest_locations(self, text: str) -> list[str]:
        """Return autocomplete suggestions for partial input.

        Args:
            text: Partial location text typed by the user.

        Returns:
            Prediction descriptions, in response order.

        Raises:
            ExternalAPIError: If the request fails or the payload is malformed.
        """
        data = self.http_client.get_json(
            self.settings.autocomplete_url,
            self._params(input=text),
            event_prefix="AUTOCOMPLETE",
            log_context={"input": text},
            error_message="Location suggestions failed",
        )

        try:
            return [prediction["description"] for prediction in data["predictions"]]
        except (TypeError, KeyError) as exc:
            logger.error("AUTOCOMPLETE_BAD_PAYLOAD", input=text, error=str(exc))
            raise ExternalAPIError("Location suggestions failed") from exc
