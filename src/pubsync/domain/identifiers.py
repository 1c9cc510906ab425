"""Identifier helpers: title slugs and DOI forms.

Slugs double as deduplication keys and document file stems, so the
normalization below must stay stable across releases.
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

SLUG_MAX_LENGTH = 80
DOI_RESOLVER_URL = "https://doi.org/"
DOI_RESOLVER_HOSTS = frozenset({"doi.org", "dx.doi.org"})

_SLUG_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")
_DOI_PREFIX = re.compile(r"^(?:https?://(?:dx\.)?doi\.org/|doi:)", re.IGNORECASE)


def slugify(title: str) -> str:
    """Return the lowercase, hyphenated, filesystem-safe form of ``title``."""

    slug = _SLUG_DISALLOWED.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    slug = slug[:SLUG_MAX_LENGTH]
    return slug.removesuffix("-")


def normalize_doi(doi: str) -> str:
    """DOI comparison key: lowercase, resolver URL or ``doi:`` prefix removed."""

    return _DOI_PREFIX.sub("", doi.strip().lower()).strip()


def format_doi_url(doi: str) -> str:
    return f"{DOI_RESOLVER_URL}{_DOI_PREFIX.sub('', doi.strip()).strip()}"


def is_doi_url(url: str) -> bool:
    try:
        parts = urlsplit(url.strip())
    except ValueError:
        return False
    if parts.scheme not in {"http", "https"}:
        return False
    return (parts.hostname or "") in DOI_RESOLVER_HOSTS
