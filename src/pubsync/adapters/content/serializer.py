"""Render publications as MDX documents with YAML front matter.

The output is consumed by the site's content loader, which expects the fields
``title, description, authors[], journal, publishDate, doi?, oaUrl?,
citedByCount, tags[]?, draft``. Field order and quoting are fixed so that an
unchanged publication always renders to identical bytes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pubsync.domain.model import Publication

UNKNOWN_JOURNAL = "Unknown Journal"
UNKNOWN_AUTHOR = "Unknown"
FRONT_MATTER_DELIMITER = "---"

_ESCAPES = str.maketrans({"\\": "\\\\", '"': '\\"', "\n": "\\n", "\r": "\\r", "\t": "\\t"})


def quote(value: str) -> str:
    """Double-quoted YAML scalar."""

    return f'"{value.translate(_ESCAPES)}"'


def render_publication(publication: Publication) -> str:
    lines = [
        FRONT_MATTER_DELIMITER,
        f"title: {quote(publication.title)}",
        f"description: {quote(publication.title)}",
        "authors:",
        *_items(publication.authors or (UNKNOWN_AUTHOR,)),
        f"journal: {quote(publication.journal or UNKNOWN_JOURNAL)}",
        f"publishDate: {publication.publish_date.isoformat()}",
    ]
    if publication.doi:
        lines.append(f"doi: {quote(publication.doi)}")
    if publication.oa_url:
        lines.append(f"oaUrl: {quote(publication.oa_url)}")
    lines.append(f"citedByCount: {publication.cited_by_count}")
    if publication.tags:
        lines.extend(("tags:", *_items(publication.tags)))
    lines.extend(("draft: false", FRONT_MATTER_DELIMITER, ""))
    return "\n".join(lines)


def _items(values: Iterable[str]) -> list[str]:
    return [f"  - {quote(value)}" for value in values]
