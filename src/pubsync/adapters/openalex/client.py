"""HTTP client for the OpenAlex works API."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from pubsync.adapters.http_resilience import ResilientClient

from .schema import OpenAlexWorksResponse

if TYPE_CHECKING:
    from pubsync.adapters.http_resilience import ClientFactory
    from pubsync.config.openalex import OpenAlexConfig

log = getLogger(__name__)


class OpenAlexAPIError(RuntimeError):
    """Raised when the OpenAlex API returns an unexpected response."""


class OpenAlexClient:
    """Low-level HTTP client for author work listings."""

    def __init__(
        self,
        *,
        config: OpenAlexConfig,
        client_factory: ClientFactory | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or ResilientClient

    async def fetch_author_works(self) -> OpenAlexWorksResponse:
        """Return the first page of the author's articles, most cited first.

        Only one page is requested, so prolific authors lose everything past
        ``per_page`` works.
        """

        if self._config.api_key is None:
            raise OpenAlexAPIError("Missing OpenAlex API key")
        params = httpx.QueryParams(
            {
                "filter": f"authorships.author.id:{self._config.author_id},type:article",
                "sort": "cited_by_count:desc",
                "per_page": self._config.per_page,
                "api_key": self._config.api_key,
            }
        )
        async with self._client_factory(self._config.resilience) as client:
            response = await client.get("works", params=params)
            response.raise_for_status()
            payload = response.json()

        if not isinstance(payload, dict) or "results" not in payload:
            raise OpenAlexAPIError("Unexpected OpenAlex response payload")
        works = OpenAlexWorksResponse.model_validate(payload)
        if works.meta is not None and works.meta.count is not None:
            if works.meta.count > len(works.results):
                log.info(
                    "  OpenAlex reports %d works; only the first %d are used",
                    works.meta.count,
                    len(works.results),
                )
        return works
