"""Grouping of registry and index records that describe the same publication.

Responsibilities of this stage:
- pair records across sources by DOI key first, then by title slug
- guarantee that every record lands in at most one emitted group
- stay pure: no merging, no I/O

DOI groups are resolved before any slug grouping, and everything a DOI group
touches (its DOI key and the slugs of its members' titles) is marked as seen.
A slug group is skipped if its slug or any of its DOIs was seen, which keeps a
record merged under its DOI from reappearing under a differently spelled title.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Protocol

from .normalize import doi_key, publication_keys, slug_key

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from pubsync.domain.model import Publication

log = logging.getLogger(__name__)


class GroupKind(StrEnum):
    DOI = "doi"
    SLUG = "slug"


class Side(StrEnum):
    REGISTRY = "registry"
    INDEX = "index"


@dataclass(slots=True)
class ReconciliationGroup:
    """At most one registry and one index record believed to be the same publication."""

    kind: GroupKind
    key: str
    registry: Publication | None = None
    index: Publication | None = None

    def add(self, publication: Publication, *, side: Side) -> None:
        current = self.registry if side is Side.REGISTRY else self.index
        if current is not None and current is not publication:
            log.debug(
                "Two %s records share %s key %r; keeping the later one",
                side,
                self.kind,
                self.key,
            )
        if side is Side.REGISTRY:
            self.registry = publication
        else:
            self.index = publication

    @property
    def members(self) -> tuple[Publication, ...]:
        return tuple(p for p in (self.registry, self.index) if p is not None)

    def doi_keys(self) -> set[str]:
        return {key for key in (doi_key(p) for p in self.members) if key is not None}

    def slug_keys(self) -> set[str]:
        return {slug_key(p) for p in self.members}


class GroupPublications(Protocol):
    """Pair registry and index records into reconciliation groups."""

    def __call__(
        self,
        registry: Sequence[Publication],
        index: Sequence[Publication],
    ) -> list[ReconciliationGroup]: ...


def group_publications(
    registry: Sequence[Publication],
    index: Sequence[Publication],
) -> list[ReconciliationGroup]:
    """Return DOI groups in encounter order, followed by the remaining slug groups."""

    by_doi: dict[str, ReconciliationGroup] = {}
    by_slug: dict[str, ReconciliationGroup] = {}

    for publication, side in _tagged(registry, index):
        keys = publication_keys(publication)
        if keys.doi_key is not None:
            group = by_doi.get(keys.doi_key)
            if group is None:
                group = by_doi[keys.doi_key] = ReconciliationGroup(GroupKind.DOI, keys.doi_key)
            group.add(publication, side=side)
        group = by_slug.get(keys.slug_key)
        if group is None:
            group = by_slug[keys.slug_key] = ReconciliationGroup(GroupKind.SLUG, keys.slug_key)
        group.add(publication, side=side)

    seen_dois: set[str] = set()
    seen_slugs: set[str] = set()
    groups: list[ReconciliationGroup] = []

    for key, group in by_doi.items():
        seen_dois.add(key)
        seen_slugs.update(group.slug_keys())
        groups.append(group)

    for key, group in by_slug.items():
        if key in seen_slugs:
            continue
        if group.doi_keys() & seen_dois:
            continue
        seen_slugs.add(key)
        groups.append(group)

    log.debug(
        "Grouped %d registry + %d index records into %d groups (%d by DOI)",
        len(registry),
        len(index),
        len(groups),
        len(by_doi),
    )
    return groups


def _tagged(
    registry: Iterable[Publication],
    index: Iterable[Publication],
) -> Iterable[tuple[Publication, Side]]:
    for publication in registry:
        yield publication, Side.REGISTRY
    for publication in index:
        yield publication, Side.INDEX
