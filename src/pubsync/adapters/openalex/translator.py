"""Translate OpenAlex work payloads into canonical publications."""

from __future__ import annotations

from datetime import date
from logging import getLogger

from pubsync.domain.identifiers import format_doi_url, is_doi_url
from pubsync.domain.model import MAX_TAGS, Provider, Publication

from .schema import OpenAlexWork

log = getLogger(__name__)


def translate_work(work: OpenAlexWork | dict[str, object]) -> Publication | None:
    """Return the canonical record, or ``None`` when title or date is unusable."""

    payload = work if isinstance(work, OpenAlexWork) else OpenAlexWork.model_validate(work)
    title = payload.title.strip() if payload.title else None
    publish_date = _parse_date(payload.publication_date)
    if not title or publish_date is None:
        log.debug("Dropping OpenAlex work %s: missing title or date", payload.id)
        return None

    raw_oa_url = payload.open_access.oa_url if payload.open_access else None
    return Publication(
        title=title,
        authors=tuple(
            a.author.display_name for a in payload.authorships if a.author.display_name
        ),
        journal=_journal(payload),
        publish_date=publish_date,
        doi=format_doi_url(payload.doi) if payload.doi else None,
        oa_url=raw_oa_url if raw_oa_url and not is_doi_url(raw_oa_url) else None,
        cited_by_count=payload.cited_by_count,
        tags=tuple(topic.display_name.lower() for topic in payload.topics[:MAX_TAGS]),
        source=Provider.OPENALEX,
    )


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _journal(work: OpenAlexWork) -> str | None:
    location = work.primary_location
    if location is None or location.source is None:
        return None
    return location.source.display_name or None
