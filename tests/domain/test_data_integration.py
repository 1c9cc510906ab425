from __future__ import annotations

from typing import TYPE_CHECKING

from pubsync.domain.data_integration import (
    PersistenceResult,
    document_names,
    reconcile_persisted,
)
from tests.helpers.publications import InMemoryDocumentStore, make_publication

if TYPE_CHECKING:
    from pubsync.domain.model import Publication


def _render(publication: Publication) -> str:
    return f"{publication.title}|{publication.cited_by_count}\n"


def test_creates_missing_documents() -> None:
    store = InMemoryDocumentStore()
    publications = [make_publication("First Paper"), make_publication("Second Paper")]

    result = reconcile_persisted(publications, store=store, render=_render)

    assert result == PersistenceResult(created=2)
    assert store.documents == {
        "first-paper.mdx": "First Paper|0\n",
        "second-paper.mdx": "Second Paper|0\n",
    }


def test_unchanged_documents_are_not_rewritten() -> None:
    store = InMemoryDocumentStore(documents={"first-paper.mdx": "First Paper|0\n"})

    result = reconcile_persisted([make_publication("First Paper")], store=store, render=_render)

    assert result == PersistenceResult(unchanged=1)
    assert store.writes == []
    assert store.deletes == []
    assert not result.changed


def test_changed_documents_are_overwritten() -> None:
    store = InMemoryDocumentStore(documents={"first-paper.mdx": "First Paper|0\n"})

    result = reconcile_persisted(
        [make_publication("First Paper", cited_by_count=4)],
        store=store,
        render=_render,
    )

    assert result == PersistenceResult(updated=1)
    assert store.documents["first-paper.mdx"] == "First Paper|4\n"


def test_orphaned_documents_are_removed_and_others_left_alone() -> None:
    store = InMemoryDocumentStore(
        documents={
            "retracted-paper.mdx": "old\n",
            "first-paper.mdx": "First Paper|0\n",
            "index.md": "not managed\n",
        }
    )

    result = reconcile_persisted([make_publication("First Paper")], store=store, render=_render)

    assert result == PersistenceResult(unchanged=1, removed=1)
    assert store.deletes == ["retracted-paper.mdx"]
    assert "index.md" in store.documents


def test_empty_publication_list_removes_every_managed_document() -> None:
    store = InMemoryDocumentStore(documents={"a.mdx": "a", "b.mdx": "b"})

    result = reconcile_persisted([], store=store, render=_render)

    assert result == PersistenceResult(removed=2)
    assert store.deletes == ["a.mdx", "b.mdx"]


def test_second_run_is_idempotent() -> None:
    store = InMemoryDocumentStore()
    publications = [
        make_publication("Erratum", doi="https://doi.org/10.1/a"),
        make_publication("Erratum", doi="https://doi.org/10.1/b"),
        make_publication("Another Paper"),
    ]

    first = reconcile_persisted(publications, store=store, render=_render)
    writes_after_first = list(store.writes)
    second = reconcile_persisted(publications, store=store, render=_render)

    assert first == PersistenceResult(created=3)
    assert second == PersistenceResult(unchanged=3)
    assert store.writes == writes_after_first


def test_document_names_suffix_title_collisions() -> None:
    publications = [
        make_publication("Erratum"),
        make_publication("Erratum!"),
        make_publication("erratum"),
        make_publication("Corrigendum"),
    ]

    assert document_names(publications, extension=".mdx") == [
        "erratum.mdx",
        "erratum-2.mdx",
        "erratum-3.mdx",
        "corrigendum.mdx",
    ]


def test_document_names_fall_back_for_empty_slug() -> None:
    assert document_names([make_publication("???")], extension=".mdx") == ["untitled.mdx"]


def test_persistence_summary() -> None:
    result = PersistenceResult(created=1, updated=2, unchanged=3, removed=4)

    assert result.summary() == "1 created, 2 updated, 3 unchanged, 4 removed"
    assert result.changed
