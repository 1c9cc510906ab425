"""Ports for fetching publications from external providers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pubsync.domain.model import Publication


@runtime_checkable
class PublicationFetcher(Protocol):
    """Async callable port returning already-normalized publications from one provider."""

    async def __call__(self) -> list[Publication]: ...


__all__ = ["PublicationFetcher"]
