"""Store API Client — one GET per call against the public store API.

Invariants:
    - Wraps a single shared httpx.AsyncClient (created once per process, never per request)
    - Never raises on upstream HTTP status: callers inspect response.is_success
    - Timeouts mapped to StoreTimeoutError; every other request failure (transport,
      redirect loop, undecodable body) to StoreUnavailableError (core/errors.py)
    - No retry, no backoff, no caching

Design Decisions:
    - Client injected, not owned: lifespan opens and closes the pool (ADR: connection reuse)
    - Query parameters passed via params= so genre names are percent-encoded
"""

import logging

import httpx

from app.config import Settings
from app.core.errors import ErrorContext, StoreTimeoutError, StoreUnavailableError

logger = logging.getLogger(__name__)


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Build the process-wide connection pool for store calls."""
    return httpx.AsyncClient(
        base_url=settings.store_base_url,
        timeout=settings.http_timeout_seconds,
        follow_redirects=True,
    )


class StoreClient:
    """Thin async client for the store's genre and app-details endpoints."""

    GENRE_LIST_PATH = "/api/getgenrelist/"
    APPS_IN_GENRE_PATH = "/api/getappsingenre/"
    APP_DETAILS_PATH = "/api/appdetails"

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings):
        self._client = http_client
        self._locale = {
            "cc": settings.store_country_code,
            "l": settings.store_language,
        }

    async def get_genre_list(self) -> httpx.Response:
        return await self._get(self.GENRE_LIST_PATH, dict(self._locale))

    async def get_apps_in_genre(self, genre: str) -> httpx.Response:
        return await self._get(
            self.APPS_IN_GENRE_PATH,
            {"genre": genre, **self._locale},
            ErrorContext(genre=genre),
        )

    async def get_app_details(self, app_id: str) -> httpx.Response:
        return await self._get(
            self.APP_DETAILS_PATH,
            {"appids": app_id},
            ErrorContext(app_id=app_id),
        )

    async def _get(
        self,
        path: str,
        params: dict[str, str],
        context: ErrorContext | None = None,
    ) -> httpx.Response:
        context = context or ErrorContext()
        context.upstream_url = path
        logger.debug(f"Store GET {path}", extra={"upstream_url": path})
        try:
            response = await self._client.get(path, params=params)
        except httpx.TimeoutException as e:
            logger.error(
                f"Store timeout on {path}: {e}",
                extra={"upstream_url": path, "error_code": "STORE_TIMEOUT"},
            )
            raise StoreTimeoutError(self._timeout_seconds(), context=context)
        except httpx.RequestError as e:
            logger.error(
                f"Store request failed on {path}: {e}",
                extra={"upstream_url": path, "error_code": "STORE_UNAVAILABLE"},
            )
            raise StoreUnavailableError(type(e).__name__, context=context)

        if not response.is_success:
            logger.warning(
                f"Store returned {response.status_code} for {path}",
                extra={"upstream_url": path, "status_code": response.status_code},
            )
        return response

    def _timeout_seconds(self) -> float | None:
        return self._client.timeout.read
