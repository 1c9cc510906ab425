"""OpenAlex index importer.

OpenAlex only enriches the registry data, so every failure here degrades to
an empty result instead of aborting the sync.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from pubsync.adapters.http_resilience import ResilientClient
from pubsync.config.openalex import OpenAlexConfig, get_openalex_config
from pubsync.domain.ports.fetching import PublicationFetcher

from .client import OpenAlexAPIError, OpenAlexClient
from .translator import translate_work

if TYPE_CHECKING:
    from pubsync.adapters.http_resilience import ClientFactory
    from pubsync.domain.model import Publication

log = getLogger(__name__)


@dataclass(slots=True)
class OpenAlexFetcher:
    config: OpenAlexConfig = field(default_factory=get_openalex_config)
    client_factory: ClientFactory = field(default=ResilientClient)

    async def __call__(self) -> list[Publication]:
        if not self.config.enabled:
            log.info("No OPENALEX_API_KEY set; skipping OpenAlex.")
            return []

        log.info("Fetching publications from OpenAlex (%s)...", self.config.author_id)
        client = OpenAlexClient(config=self.config, client_factory=self.client_factory)
        # ValueError covers undecodable JSON and pydantic validation errors
        try:
            works = await client.fetch_author_works()
        except (httpx.HTTPError, OpenAlexAPIError, ValueError) as exc:
            log.warning("  OpenAlex failed: %s; continuing with ORCID only", exc)
            return []

        translated = (translate_work(work) for work in works.results)
        publications = [p for p in translated if p is not None]
        log.info("  %d valid OpenAlex publications", len(publications))
        return publications


if TYPE_CHECKING:
    _fetcher_check: PublicationFetcher = OpenAlexFetcher()
