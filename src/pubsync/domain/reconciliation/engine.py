"""Reconciliation of registry and index records into one list of publications."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .deduplicate import group_publications
from .resolve import merge_group

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pubsync.domain.model import Publication

    from .deduplicate import GroupPublications
    from .resolve import MergeGroup

log = logging.getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    """Group duplicate records across sources and merge each group."""

    group: GroupPublications = field(default=group_publications)
    merge: MergeGroup = field(default=merge_group)

    def reconcile(
        self,
        registry: Sequence[Publication],
        index: Sequence[Publication],
    ) -> list[Publication]:
        groups = self.group(registry, index)
        merged = [self.merge(group) for group in groups]
        log.debug("Merged %d groups into %d publications", len(groups), len(merged))
        return merged


def reconcile(
    registry: Sequence[Publication],
    index: Sequence[Publication],
) -> list[Publication]:
    """Deduplicate and merge records from both sources, deterministically."""

    return ReconciliationEngine().reconcile(registry, index)
