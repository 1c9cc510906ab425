"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import PublicationFetcher
from .persistence import DocumentStore

__all__ = ["DocumentStore", "PublicationFetcher"]
