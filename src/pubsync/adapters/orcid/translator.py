"""Translate ORCID work payloads into canonical publications."""

from __future__ import annotations

import re
from datetime import date
from logging import getLogger
from typing import TYPE_CHECKING

from pubsync.domain.identifiers import format_doi_url, is_doi_url
from pubsync.domain.model import Provider, Publication

from .schema import (
    CITATION_TYPE_BIBTEX,
    EXTERNAL_ID_TYPE_DOI,
    RELATIONSHIP_SELF,
    OrcidWork,
)

if TYPE_CHECKING:
    from .schema import OrcidExternalIds, OrcidPublicationDate, OrcidValue

log = getLogger(__name__)

_BIBTEX_AUTHOR_FIELD = re.compile(r"author\s*=\s*\{([^}]+)\}", re.IGNORECASE)
_BIBTEX_AUTHOR_SEPARATOR = re.compile(r"\s+and\s+", re.IGNORECASE)


def translate_work(work: OrcidWork | dict[str, object]) -> Publication | None:
    """Return the canonical record, or ``None`` when title or date is unusable."""

    payload = work if isinstance(work, OrcidWork) else OrcidWork.model_validate(work)
    title = _value(payload.title.title if payload.title else None)
    publish_date = parse_publication_date(payload.publication_date)
    if title is None or publish_date is None:
        log.debug("Dropping ORCID work %s: missing title or date", payload.put_code)
        return None

    raw_url = _value(payload.url)
    return Publication(
        title=title,
        authors=parse_authors(payload),
        journal=_journal(payload),
        publish_date=publish_date,
        doi=parse_doi(payload.external_ids),
        oa_url=raw_url if raw_url and not is_doi_url(raw_url) else None,
        source=Provider.ORCID,
    )


def parse_publication_date(publication_date: OrcidPublicationDate | None) -> date | None:
    """Assemble a date from year/month/day parts; month and day default to 1."""

    if publication_date is None:
        return None
    year = _value(publication_date.year)
    if year is None:
        return None
    month = _value(publication_date.month) or "01"
    day = _value(publication_date.day) or "01"
    try:
        return date.fromisoformat(f"{year}-{month.zfill(2)}-{day.zfill(2)}")
    except ValueError:
        log.debug("Unparseable ORCID date parts: %s-%s-%s", year, month, day)
        return None


def parse_doi(external_ids: OrcidExternalIds | None) -> str | None:
    """Return the work's own DOI; related or part-of identifiers do not count."""

    if external_ids is None:
        return None
    for external_id in external_ids.external_id:
        if (
            external_id.type == EXTERNAL_ID_TYPE_DOI
            and external_id.relationship == RELATIONSHIP_SELF
            and external_id.value.strip()
        ):
            return format_doi_url(external_id.value)
    return None


def parse_authors(work: OrcidWork) -> tuple[str, ...]:
    if work.contributors is not None:
        names = tuple(
            name
            for name in (_value(c.credit_name) for c in work.contributors.contributor)
            if name
        )
        if names:
            return names

    citation = work.citation
    if citation is None or citation.citation_type != CITATION_TYPE_BIBTEX:
        return ()
    if not citation.citation_value:
        return ()
    return parse_bibtex_authors(citation.citation_value)


def parse_bibtex_authors(bibtex: str) -> tuple[str, ...]:
    match = _BIBTEX_AUTHOR_FIELD.search(bibtex)
    if match is None:
        return ()
    names = (name.strip() for name in _BIBTEX_AUTHOR_SEPARATOR.split(match.group(1)))
    return tuple(name for name in names if name)


def _journal(work: OrcidWork) -> str | None:
    journal = _value(work.journal_title)
    if journal is not None:
        return journal
    return _value(work.title.subtitle if work.title else None)


def _value(field: OrcidValue | None) -> str | None:
    return field.value if field is not None else None
