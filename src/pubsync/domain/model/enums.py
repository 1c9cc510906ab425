"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Provider(StrEnum):
    """Where a publication record came from.

    ORCID is the registry (primary) source, OpenAlex the index (secondary) source.
    """

    ORCID = "orcid"
    OPENALEX = "openalex"
