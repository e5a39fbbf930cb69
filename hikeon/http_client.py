"""Thin HTTP GET wrapper with optional retry/backoff and consistent logging."""

import time

import httpx

from hikeon.errors import ExternalAPIError
from hikeon.logging_config import logger

RETRY_BASE_DELAY_S = 0.3
RETRY_MAX_DELAY_S = 2.0
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


class HttpClient:
    """Send GET requests and hand back successful responses.

    ``attempts`` defaults to a single try; callers opt into retries through
    ``Settings.http_retry_attempts``.
    """

    def __init__(self, timeout: float = 10.0, attempts: int = 1):
        self.timeout = timeout
        self.attempts = max(1, attempts)

    @classmethod
    def from_settings(cls, settings) -> "HttpClient":
        return cls(timeout=settings.http_timeout_s, attempts=settings.http_retry_attempts)

    def get(
        self,
        url: str,
        params: dict,
        *,
        event_prefix: str,
        log_context: dict | None = None,
        error_message: str = "Request failed",
    ) -> httpx.Response:
        """Execute an HTTP GET, retrying retryable failures when configured.

        Args:
            url: The URL to call.
            params: Query parameters, URL-encoded by httpx.
            event_prefix: Log event prefix for consistent names.
            log_context: Extra log fields for all events.
            error_message: Error message to wrap in ExternalAPIError.

        Returns:
            The successful HTTP response.

        Raises:
            ExternalAPIError: When the request fails after all attempts.
        """
        log_context = log_context or {}
        for attempt in range(1, self.attempts + 1):
            try:
                response = httpx.get(url, params=params, timeout=self.timeout)
                logger.info(
                    f"{event_prefix}_RESPONSE",
                    **log_context,
                    status=response.status_code,
                    attempt=attempt,
                )
                response.raise_for_status()
                return response
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                retryable = status_code in RETRYABLE_STATUS_CODES
                logger.error(
                    f"{event_prefix}_BAD_STATUS",
                    **log_context,
                    status=status_code,
                    attempt=attempt,
                    retryable=retryable,
                )
                if not retryable or attempt == self.attempts:
                    raise ExternalAPIError(error_message) from exc
            except httpx.RequestError as exc:
                logger.error(
                    f"{event_prefix}_REQUEST_FAILED",
                    **log_context,
                    error=str(exc),
                    attempt=attempt,
                )
                if attempt == self.attempts:
                    raise ExternalAPIError(error_message) from exc

            delay = min(RETRY_BASE_DELAY_S * (2 ** (attempt - 1)), RETRY_MAX_DELAY_S)
            logger.info(
                f"{event_prefix}_RETRY",
                **log_context,
                attempt=attempt + 1,
                delay_s=delay,
            )
            time.sleep(delay)

        raise ExternalAPIError(error_message)

    def get_json(
        self,
        url: str,
        params: dict,
        *,
        event_prefix: str,
        log_context: dict | None = None,
        error_message: str = "Request failed",
    ):
        """GET ``url`` and decode the body as JSON.

        Raises:
            ExternalAPIError: On request failure or a body that is not JSON.
        """
        response = self.get(
            url,
            params,
            event_prefix=event_prefix,
            log_context=log_context,
            error_message=error_message,
        )
        try:
            return response.json()
        except ValueError as exc:
            logger.error(f"{event_prefix}_BAD_JSON", **(log_context or {}), error=str(exc))
            raise ExternalAPIError(error_message) from exc
