"""ORCID registry importer (journal articles of one ORCID record)."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from pubsync.adapters.http_resilience import ResilientClient
from pubsync.common.iterables import chunked
from pubsync.config.orcid import OrcidConfig, get_orcid_config
from pubsync.domain.ports.fetching import PublicationFetcher

from .client import OrcidClient, should_cache_payload
from .schema import WORK_TYPE_JOURNAL_ARTICLE
from .translator import translate_work

if TYPE_CHECKING:
    from pubsync.adapters.http_resilience import ClientFactory
    from pubsync.domain.model import Publication

    from .schema import OrcidWork, OrcidWorksResponse

log = getLogger(__name__)


def _default_config() -> OrcidConfig:
    return get_orcid_config(cache_predicate=should_cache_payload)


@dataclass(slots=True)
class OrcidFetcher:
    """Fetch and normalize the journal articles listed on an ORCID record.

    Errors are not caught here: the registry is the primary source and a
    failure must abort the sync before anything is written.
    """

    config: OrcidConfig = field(default_factory=_default_config)
    client_factory: ClientFactory = field(default=ResilientClient)

    async def __call__(self) -> list[Publication]:
        log.info("Fetching works from ORCID (%s)...", self.config.orcid_id)
        async with OrcidClient(config=self.config, client_factory=self.client_factory) as client:
            summaries = await client.fetch_work_summaries()
            put_codes = journal_article_put_codes(summaries)
            log.info(
                "  Found %d work groups, %d journal articles",
                len(summaries.group),
                len(put_codes),
            )
            works = await _fetch_full_works(client, put_codes, batch_size=self.config.batch_size)

        publications = [p for p in (translate_work(work) for work in works) if p is not None]
        log.info("  %d valid ORCID publications", len(publications))
        return publications


def journal_article_put_codes(summaries: OrcidWorksResponse) -> list[int]:
    put_codes: list[int] = []
    for group in summaries.group:
        summary = group.preferred_summary
        if summary is not None and summary.type == WORK_TYPE_JOURNAL_ARTICLE:
            put_codes.append(summary.put_code)
    return put_codes


async def _fetch_full_works(
    client: OrcidClient,
    put_codes: list[int],
    *,
    batch_size: int,
) -> list[OrcidWork]:
    works: list[OrcidWork] = []
    # one batch in flight at a time
    for batch in chunked(put_codes, batch_size):
        bulk = await client.fetch_works(batch)
        for entry in bulk.bulk:
            if entry.work is None:
                log.debug("ORCID bulk lookup returned an error entry: %s", entry.error)
                continue
            works.append(entry.work)
    return works


if TYPE_CHECKING:
    _fetcher_check: PublicationFetcher = OrcidFetcher()
