"""OpenAlex index adapter."""

from __future__ import annotations

from .client import OpenAlexAPIError, OpenAlexClient
from .fetcher import OpenAlexFetcher
from .schema import OpenAlexWork, OpenAlexWorksResponse
from .translator import translate_work

__all__ = [
    "OpenAlexAPIError",
    "OpenAlexClient",
    "OpenAlexFetcher",
    "OpenAlexWork",
    "OpenAlexWorksResponse",
    "translate_work",
]
