"""HTTP client for the paginated remote movie listing."""
from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..errors import CatalogClientError
from ..schemas import CatalogPage, ListMoviesResponse
from ..settings import CatalogSettings

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 50


class CatalogClient:
    """Fetches pages of the remote listing, newest additions first."""

    def __init__(
        self,
        http_client: httpx.Client,
        *,
        api_url: str,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._http = http_client
        self._api_url = api_url
        self._page_size = page_size

    @classmethod
    def from_settings(cls, settings: CatalogSettings, http_client: httpx.Client) -> CatalogClient:
        return cls(http_client, api_url=settings.api_url, page_size=settings.page_size)

    def build_params(self, page: int) -> dict[str, Any]:
        """Return the query parameters for a 1-based ``page``."""

        return {
            "limit": self._page_size,
            "page": page,
            "sort_by": "date_added",
            "order_by": "desc",
        }

    def fetch_page(self, page: int) -> CatalogPage:
        """Fetch and decode a single page of the listing.

        Any transport, status or decode failure raises ``CatalogClientError``;
        nothing is retried.
        """

        if page < 1:
            raise ValueError("page numbers start at 1")

        logger.debug("Requesting catalog page %d", page)
        try:
            response = self._http.get(self._api_url, params=self.build_params(page))
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise CatalogClientError(
                f"Catalog responded with HTTP {exc.response.status_code} for page {page}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogClientError(f"Failed to contact catalog: {exc}") from exc

        try:
            payload = ListMoviesResponse.model_validate_json(response.content)
        except ValidationError as exc:
            raise CatalogClientError(f"Catalog returned an invalid response for page {page}") from exc

        movies = payload.data.movies or []
        logger.debug("Page %d returned %d movies", page, len(movies))
        return CatalogPage(page=page, movie_count=payload.data.movie_count, movies=movies)
