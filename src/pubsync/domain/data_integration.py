"""Convergence of the on-disk document set with the reconciled publications."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pubsync.domain.identifiers import slugify

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pubsync.domain.model import Publication
    from pubsync.domain.ports.persistence import DocumentStore

FALLBACK_STEM = "untitled"

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class PersistenceResult:
    """Counts describing how the document set changed."""

    created: int = 0
    updated: int = 0
    unchanged: int = 0
    removed: int = 0

    @property
    def changed(self) -> bool:
        return bool(self.created or self.updated or self.removed)

    def summary(self) -> str:
        return (
            f"{self.created} created, {self.updated} updated, "
            f"{self.unchanged} unchanged, {self.removed} removed"
        )


def document_names(publications: Iterable[Publication], *, extension: str) -> list[str]:
    """Return one distinct document name per publication, in order.

    Names derive from the title slug. Distinct publications can share a title
    (say two erratum notices with their own DOIs), so repeats get a numeric
    suffix in encounter order.
    """

    names: list[str] = []
    taken: set[str] = set()
    for publication in publications:
        stem = slugify(publication.title) or FALLBACK_STEM
        name = f"{stem}{extension}"
        counter = 1
        while name in taken:
            counter += 1
            name = f"{stem}-{counter}{extension}"
        if counter > 1:
            log.warning("Title slug %r already used; writing %s instead", stem, name)
        taken.add(name)
        names.append(name)
    return names


def reconcile_persisted(
    publications: Iterable[Publication],
    *,
    store: DocumentStore,
    render: Callable[[Publication], str],
) -> PersistenceResult:
    """Write, overwrite, or delete documents so ``store`` holds exactly ``publications``.

    Documents whose content is already identical are left alone, so repeated
    runs on the same inputs perform no writes at all.
    """

    publications = list(publications)
    remaining = store.names()
    created = updated = unchanged = removed = 0

    for publication, name in zip(
        publications,
        document_names(publications, extension=store.extension),
        strict=True,
    ):
        content = render(publication)
        if name not in remaining:
            store.write(name, content)
            created += 1
            log.info("Created: %s", name)
            continue
        remaining.discard(name)
        if store.read(name) != content:
            store.write(name, content)
            updated += 1
            log.info("Updated: %s", name)
        else:
            unchanged += 1

    for orphan in sorted(remaining):
        store.delete(orphan)
        removed += 1
        log.info("Removed: %s", orphan)

    return PersistenceResult(
        created=created,
        updated=updated,
        unchanged=unchanged,
        removed=removed,
    )
