"""HTTP client used by the web page to load the home document."""

from __future__ import annotations

import json
import logging
from types import TracebackType

import httpx

from greeting_app.domain.entities import GreetingDocument

logger = logging.getLogger(__name__)

HOME_PATH = "/api/home"
GENERIC_FAILURE_MESSAGE = "Something went wrong while loading data."


class HomeApiError(RuntimeError):
    """Base error for failures while loading the home document."""


class HttpStatusError(HomeApiError):
    """The API answered with a non-success status code."""

    def __init__(self, status_code: int, reason_phrase: str) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        message = f"HTTP error {status_code}"
        if reason_phrase:
            message = f"{message}: {reason_phrase}"
        super().__init__(message)


class NetworkFailure(HomeApiError):
    """The request could not complete or the body could not be decoded."""

    def __init__(self, description: str | None = None) -> None:
        super().__init__((description or "").strip() or GENERIC_FAILURE_MESSAGE)


class HomeApiClient:
    """Fetch the home document from the API.

    When no ``http_client`` is provided one is created for ``base_url`` and
    closed by :meth:`aclose`.
    """

    def __init__(
        self,
        base_url: str = "",
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(base_url=base_url)

    async def fetch_home(self) -> GreetingDocument:
        """Return the home document.

        Raises ``HttpStatusError`` for non-success responses and
        ``NetworkFailure`` for transport or decoding problems. Cancellation is
        propagated unchanged.
        """

        try:
            response = await self._client.get(HOME_PATH)
        except httpx.HTTPError as exc:
            logger.warning("Request to %s failed: %s", HOME_PATH, exc)
            raise NetworkFailure(str(exc)) from exc

        if not response.is_success:
            logger.warning(
                "Request to %s returned status %s", HOME_PATH, response.status_code
            )
            raise HttpStatusError(response.status_code, response.reason_phrase)

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("Response from %s is not valid JSON: %s", HOME_PATH, exc)
            raise NetworkFailure(f"Invalid JSON response: {exc}") from exc

        return GreetingDocument.from_payload(payload)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HomeApiClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "HOME_PATH",
    "HomeApiClient",
    "HomeApiError",
    "HttpStatusError",
    "NetworkFailure",
]
