from __future__ import annotations

from pubsync.domain.model import Provider
from pubsync.domain.reconciliation import GroupKind, ReconciliationGroup, Side, group_publications
from tests.helpers.publications import make_publication


def test_doi_match_wins_over_different_titles() -> None:
    registry = make_publication(
        "Deep Learning for Coral Reef Monitoring",
        doi="https://doi.org/10.1000/CORAL.1",
    )
    index = make_publication(
        "Deep learning on coral reefs (extended version)",
        source=Provider.OPENALEX,
        doi="https://doi.org/10.1000/coral.1",
    )

    groups = group_publications([registry], [index])

    assert len(groups) == 1
    assert groups[0].kind is GroupKind.DOI
    assert groups[0].key == "10.1000/coral.1"
    assert groups[0].registry is registry
    assert groups[0].index is index


def test_slug_fallback_pairs_records_without_doi() -> None:
    registry = make_publication("Sparse Models of Tidal Flow")
    index = make_publication("Sparse models of tidal flow.", source=Provider.OPENALEX)

    groups = group_publications([registry], [index])

    assert len(groups) == 1
    assert groups[0].kind is GroupKind.SLUG
    assert groups[0].members == (registry, index)


def test_title_twin_without_doi_is_absorbed_by_doi_group() -> None:
    registry = make_publication("Ocean Heat Content Revisited")
    index = make_publication(
        "Ocean heat content revisited",
        source=Provider.OPENALEX,
        doi="https://doi.org/10.1/heat",
    )

    groups = group_publications([registry], [index])

    assert [(group.kind, group.members) for group in groups] == [
        (GroupKind.DOI, (index,)),
    ]


def test_record_grouped_by_doi_does_not_reappear_by_slug() -> None:
    registry = make_publication("First Title", doi="https://doi.org/10.1/x")
    index = make_publication("Second Title", source=Provider.OPENALEX, doi="10.1/X")

    groups = group_publications([registry], [index])

    assert len(groups) == 1
    assert {p.title for p in groups[0].members} == {"First Title", "Second Title"}


def test_conflicting_dois_with_same_title_stay_separate() -> None:
    registry = make_publication("Erratum", doi="https://doi.org/10.1/a")
    index = make_publication("Erratum", source=Provider.OPENALEX, doi="https://doi.org/10.1/b")

    groups = group_publications([registry], [index])

    assert [(group.kind, group.key) for group in groups] == [
        (GroupKind.DOI, "10.1/a"),
        (GroupKind.DOI, "10.1/b"),
    ]


def test_unmatched_records_become_singleton_groups() -> None:
    registry = make_publication("Only In Registry")
    index = make_publication("Only In Index", source=Provider.OPENALEX)

    groups = group_publications([registry], [index])

    assert [group.members for group in groups] == [(registry,), (index,)]
    assert groups[0].index is None
    assert groups[1].registry is None


def test_groups_ordered_doi_first_then_slug_in_encounter_order() -> None:
    r_slug = make_publication("Registry Slug Only")
    r_doi = make_publication("Registry With Doi", doi="https://doi.org/10.1/r")
    i_slug = make_publication("Index Slug Only", source=Provider.OPENALEX)
    i_doi = make_publication("Index With Doi", source=Provider.OPENALEX, doi="10.1/i")

    groups = group_publications([r_slug, r_doi], [i_slug, i_doi])

    assert [(group.kind, group.key) for group in groups] == [
        (GroupKind.DOI, "10.1/r"),
        (GroupKind.DOI, "10.1/i"),
        (GroupKind.SLUG, "registry-slug-only"),
        (GroupKind.SLUG, "index-slug-only"),
    ]


def test_every_record_lands_in_at_most_one_group() -> None:
    registry = [
        make_publication("Alpha", doi="https://doi.org/10.1/alpha"),
        make_publication("Beta"),
        make_publication("Gamma", doi="https://doi.org/10.1/gamma"),
    ]
    index = [
        make_publication("Alpha (preprint)", source=Provider.OPENALEX, doi="10.1/ALPHA"),
        make_publication("beta", source=Provider.OPENALEX),
        make_publication("Delta", source=Provider.OPENALEX),
    ]

    groups = group_publications(registry, index)

    seen = [id(member) for group in groups for member in group.members]
    assert len(seen) == len(set(seen))
    assert len(groups) == 4


def test_group_add_keeps_later_record_on_same_side() -> None:
    first = make_publication("Same")
    second = make_publication("Same", cited_by_count=3)
    group = ReconciliationGroup(GroupKind.SLUG, "same")

    group.add(first, side=Side.REGISTRY)
    group.add(second, side=Side.REGISTRY)

    assert group.registry is second
    assert group.members == (second,)
