"""Canonical publication record shared by both sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from .enums import Provider

MAX_TAGS = 3


@dataclass(frozen=True, slots=True, kw_only=True)
class Publication:
    """One journal article in the shape every pipeline stage agrees on.

    ``journal`` is ``None`` when the source did not name a venue; the placeholder
    text is only introduced when the record is serialized. ``doi`` is always the
    resolver URL form (``https://doi.org/<suffix>``).
    """

    title: str
    publish_date: date
    source: Provider
    authors: tuple[str, ...] = ()
    journal: str | None = None
    doi: str | None = None
    oa_url: str | None = None
    cited_by_count: int = 0
    tags: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not self.title.strip():
            raise ValueError("Publication title must not be blank")
        if self.cited_by_count < 0:
            raise ValueError(f"Citation count must be non-negative, got {self.cited_by_count}")
        if len(self.tags) > MAX_TAGS:
            raise ValueError(f"At most {MAX_TAGS} tags are allowed, got {len(self.tags)}")

    @property
    def has_default_day(self) -> bool:
        """True when the date sits on January 1st, the pattern of a year-only date."""

        return self.publish_date.month == 1 and self.publish_date.day == 1
