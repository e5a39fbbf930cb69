"""Exceptions raised by the HikeOn services."""


class HikeOnError(Exception):
    """Base exception for HikeOn failures."""
    pass


class ExternalAPIError(HikeOnError):
    """Raised when a remote API fails or returns an unusable payload."""
    pass


class LocationNotFoundError(HikeOnError, ValueError):
    """Raised when geocoding returns no results for a location."""
    pass


class InvalidInputError(HikeOnError, ValueError):
    """Raised when a service receives blank input."""
    pass
