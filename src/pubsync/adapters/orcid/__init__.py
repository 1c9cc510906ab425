"""ORCID registry adapter."""

from __future__ import annotations

from .client import OrcidAPIError, OrcidClient
from .fetcher import OrcidFetcher, journal_article_put_codes
from .schema import OrcidBulkResponse, OrcidWork, OrcidWorksResponse
from .translator import translate_work

__all__ = [
    "OrcidAPIError",
    "OrcidBulkResponse",
    "OrcidClient",
    "OrcidFetcher",
    "OrcidWork",
    "OrcidWorksResponse",
    "journal_article_put_codes",
    "translate_work",
]
