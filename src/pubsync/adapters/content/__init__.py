"""MDX content output adapter."""

from __future__ import annotations

from .serializer import UNKNOWN_JOURNAL, render_publication
from .store import FilesystemDocumentStore

__all__ = ["UNKNOWN_JOURNAL", "FilesystemDocumentStore", "render_publication"]
