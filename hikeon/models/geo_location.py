"""Coordinate pair returned by geocoding lookups."""

from pydantic import BaseModel, ConfigDict


class GeoLocation(BaseModel):
    """Latitude/longitude of a resolved location."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def as_param(self) -> str:
        """Return the ``lat,lng`` form used by the Places API."""
        return f"{self.latitude},{self.longitude}"
