"""Deterministic identity keys for publication records.

Two keys are derived per record:
- the DOI key, the strongest identity signal, present only when the source captured a DOI
- the slug key, always present, derived from the title
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pubsync.domain.identifiers import normalize_doi, slugify

if TYPE_CHECKING:
    from pubsync.domain.model import Publication


@dataclass(frozen=True, slots=True)
class PublicationKeys:
    doi_key: str | None
    slug_key: str


def doi_key(publication: Publication) -> str | None:
    if not publication.doi:
        return None
    return normalize_doi(publication.doi) or None


def slug_key(publication: Publication) -> str:
    return slugify(publication.title)


def publication_keys(publication: Publication) -> PublicationKeys:
    return PublicationKeys(doi_key=doi_key(publication), slug_key=slug_key(publication))
