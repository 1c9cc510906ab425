"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pubsync.adapters.content import FilesystemDocumentStore, render_publication
from pubsync.adapters.openalex import OpenAlexFetcher
from pubsync.adapters.orcid import OrcidFetcher
from pubsync.config.storage import ContentConfig, get_content_config
from pubsync.domain.data_integration import PersistenceResult, reconcile_persisted
from pubsync.domain.reconciliation import reconcile

if TYPE_CHECKING:
    from pubsync.domain.model import Publication
    from pubsync.domain.ports import DocumentStore, PublicationFetcher


log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SyncPublicationsResult:
    """Outcome of one publication sync run."""

    registry_count: int
    index_count: int
    merged_count: int
    persistence: PersistenceResult


def sync_publications(
    *,
    registry: PublicationFetcher | None = None,
    index: PublicationFetcher | None = None,
    store: DocumentStore | None = None,
    content_config: ContentConfig | None = None,
) -> SyncPublicationsResult:
    """Fetch from ORCID and OpenAlex, merge duplicates, and converge the document set.

    A registry failure propagates before anything is written; the index
    fetcher degrades to an empty result on its own.
    """

    effective_registry = registry or OrcidFetcher()
    effective_index = index or OpenAlexFetcher()
    effective_store = store or _default_store(content_config or get_content_config())

    registry_publications, index_publications = asyncio.run(
        _fetch_all(effective_registry, effective_index)
    )
    log.info(
        "Merging: %d ORCID + %d OpenAlex",
        len(registry_publications),
        len(index_publications),
    )

    merged = reconcile(registry_publications, index_publications)
    log.info("Result: %d unique publications", len(merged))

    persistence = reconcile_persisted(merged, store=effective_store, render=render_publication)
    log.info("Finished publication sync: %s", persistence.summary())

    return SyncPublicationsResult(
        registry_count=len(registry_publications),
        index_count=len(index_publications),
        merged_count=len(merged),
        persistence=persistence,
    )


async def _fetch_all(
    registry: PublicationFetcher,
    index: PublicationFetcher,
) -> tuple[list[Publication], list[Publication]]:
    registry_publications, index_publications = await asyncio.gather(registry(), index())
    return registry_publications, index_publications


def _default_store(config: ContentConfig) -> FilesystemDocumentStore:
    return FilesystemDocumentStore(config.resolve_output_dir(), extension=config.extension)
