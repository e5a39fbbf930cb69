"""Hiking spot model built from Places text-search results."""

from pydantic import BaseModel, ConfigDict

MISSING = -1


class HikingSpot(BaseModel):
    """A point of interest returned by a hiking trail search."""

    model_config = ConfigDict(frozen=True)

    name: str
    latitude: float
    longitude: float
    rating: float = MISSING
    total_ratings: int = MISSING

    @property
    def has_rating(self) -> bool:
        return self.rating != MISSING

    @classmethod
    def from_api_result(cls, result: dict) -> "HikingSpot":
        """Create a HikingSpot from one entry of a Places ``results`` array.

        Missing ``rating`` or ``user_ratings_total`` fields become -1; a
        present rating of 0 is kept.

        Args:
            result: Places API result entry.

        Returns:
            A populated HikingSpot.
        """
        location = result["geometry"]["location"]
        return cls(
            name=result["name"],
            latitude=location["lat"],
            longitude=location["lng"],
            rating=result.get("rating", MISSING),
            total_ratings=result.get("user_ratings_total", MISSING),
        )
