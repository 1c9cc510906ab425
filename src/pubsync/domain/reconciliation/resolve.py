"""Field-level merge policy for a reconciliation group.

The index (OpenAlex) is treated as the enriching source: it wins every field
where it carries a usable value, and the registry (ORCID) fills the gaps.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Protocol

from pubsync.domain.model import Provider

if TYPE_CHECKING:
    from datetime import date

    from pubsync.domain.model import Publication

    from .deduplicate import ReconciliationGroup


class EmptyGroupError(ValueError):
    """Raised when a reconciliation group holds no records at all."""


class MergeGroup(Protocol):
    """Resolve one reconciliation group into a single publication."""

    def __call__(self, group: ReconciliationGroup) -> Publication: ...


def merge_group(group: ReconciliationGroup) -> Publication:
    return merge_pair(group.registry, group.index)


def merge_pair(registry: Publication | None, index: Publication | None) -> Publication:
    if index is None:
        if registry is None:
            raise EmptyGroupError("Cannot merge a group without records")
        return registry
    if registry is None:
        return index

    return replace(
        index,
        authors=index.authors if len(index.authors) >= len(registry.authors) else registry.authors,
        journal=index.journal if index.journal is not None else registry.journal,
        publish_date=_preferred_date(registry, index),
        doi=index.doi or registry.doi,
        oa_url=index.oa_url or registry.oa_url,
        tags=index.tags or registry.tags,
        # an index-backed record counts as enriched, whichever side won most fields
        source=Provider.OPENALEX,
    )


def _preferred_date(registry: Publication, index: Publication) -> date:
    # OpenAlex falls back to January 1st for year-only dates
    if index.has_default_day and not registry.has_default_day:
        return registry.publish_date
    return index.publish_date
