"""Domain model for publication sync."""

from __future__ import annotations

from .enums import Provider
from .publication import MAX_TAGS, Publication

__all__ = ["MAX_TAGS", "Provider", "Publication"]
