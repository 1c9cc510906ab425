"""Cross-source reconciliation of publication records."""

from __future__ import annotations

from .deduplicate import GroupKind, ReconciliationGroup, Side, group_publications
from .engine import ReconciliationEngine, reconcile
from .normalize import PublicationKeys, doi_key, publication_keys, slug_key
from .resolve import EmptyGroupError, merge_group, merge_pair

__all__ = [
    "EmptyGroupError",
    "GroupKind",
    "PublicationKeys",
    "ReconciliationEngine",
    "ReconciliationGroup",
    "Side",
    "doi_key",
    "group_publications",
    "merge_group",
    "merge_pair",
    "publication_keys",
    "reconcile",
    "slug_key",
]
